"""Domain models representing core business entities."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class CharacterStatus(Enum):
    """Life status of a character.

    Members are keyed by the value the API sends; ``label`` is the text
    shown to users.
    """
    ALIVE = "Alive"
    DEAD = "Dead"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class CharacterGender(Enum):
    """Gender of a character, keyed by the API value."""
    FEMALE = "Female"
    MALE = "Male"
    GENDERLESS = "Genderless"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Location:
    """A character's origin or last known location."""
    name: str
    url: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Location':
        return cls(name=data["name"], url=data["url"])


@dataclass(frozen=True)
class Character:
    """Immutable domain entity representing a character.

    The ``id`` is assigned by the remote API and is never changed locally.
    """
    id: int
    name: str
    status: CharacterStatus
    species: str
    type: str
    gender: CharacterGender
    origin: Location
    location: Location
    image: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Character':
        """Build a Character from an API payload.

        Fields not listed on the dataclass are ignored.

        Raises:
            KeyError: A required field is missing
            ValueError: ``status`` or ``gender`` holds an unknown value
            TypeError: ``id`` is not an integer
        """
        character_id = data["id"]
        if not isinstance(character_id, int) or isinstance(character_id, bool):
            raise TypeError(f"Character id must be an integer, got {character_id!r}")

        return cls(
            id=character_id,
            name=data["name"],
            status=CharacterStatus(data["status"]),
            species=data["species"],
            type=data["type"],
            gender=CharacterGender(data["gender"]),
            origin=Location.from_dict(data["origin"]),
            location=Location.from_dict(data["location"]),
            image=data["image"]
        )


@dataclass(frozen=True)
class PageInfo:
    """Pagination metadata returned with every page of characters."""
    count: int
    pages: int
    next: Optional[str] = None
    prev: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PageInfo':
        return cls(
            count=int(data["count"]),
            pages=int(data["pages"]),
            next=data.get("next"),
            prev=data.get("prev")
        )


@dataclass(frozen=True)
class CharactersPage:
    """One page of characters together with its pagination info."""
    info: PageInfo
    results: Tuple[Character, ...]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CharactersPage':
        return cls(
            info=PageInfo.from_dict(data["info"]),
            results=tuple(Character.from_dict(item) for item in data["results"])
        )
