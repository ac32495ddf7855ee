"""Tests for domain models."""
import dataclasses

import pytest

from rickandmorty.domain.models import (
    Character,
    CharacterGender,
    CharactersPage,
    CharacterStatus,
    Location,
    PageInfo,
)
from rickandmorty.domain.result import Failure, Success
from factories import character_payload, page_payload


def test_character_from_dict(rick_payload):
    """Test building a Character from an API payload."""
    character = Character.from_dict(rick_payload)

    assert character.id == 1
    assert character.name == "Rick Sanchez"
    assert character.status is CharacterStatus.ALIVE
    assert character.gender is CharacterGender.MALE
    assert character.origin == Location(
        name="Earth (C-137)",
        url="https://rickandmortyapi.com/api/location/1"
    )
    assert character.location.name == "Citadel of Ricks"
    assert character.image.endswith("/1.jpeg")


def test_character_ignores_unknown_fields(rick_payload):
    """Test that fields the model does not know about are dropped."""
    rick_payload["dimension"] = "C-137"

    character = Character.from_dict(rick_payload)

    field_names = {field.name for field in dataclasses.fields(character)}
    assert "episode" not in field_names
    assert "dimension" not in field_names


def test_character_is_immutable(rick_payload):
    """Test that a Character cannot be modified."""
    character = Character.from_dict(rick_payload)

    with pytest.raises(dataclasses.FrozenInstanceError):
        character.name = "Morty Smith"


def test_character_missing_field_raises(rick_payload):
    """Test that a payload without a required field is rejected."""
    del rick_payload["name"]

    with pytest.raises(KeyError):
        Character.from_dict(rick_payload)


def test_character_unknown_status_raises():
    """Test that an unknown status value is rejected."""
    with pytest.raises(ValueError):
        Character.from_dict(character_payload(1, status="Zombie"))


def test_character_non_integer_id_raises():
    """Test that a non-integer id is rejected."""
    with pytest.raises(TypeError):
        Character.from_dict(character_payload("1"))


def test_enum_labels():
    """Test the display labels of status and gender."""
    assert CharacterStatus("unknown") is CharacterStatus.UNKNOWN
    assert CharacterStatus.UNKNOWN.label == "Unknown"
    assert CharacterStatus.DEAD.label == "Dead"
    assert CharacterGender("Genderless").label == "Genderless"
    assert CharacterGender.UNKNOWN.label == "Unknown"


def test_characters_page_from_dict():
    """Test building a page with its pagination info."""
    page = CharactersPage.from_dict(page_payload([1, 2], pages=42, count=826))

    assert page.info == PageInfo(
        count=826,
        pages=42,
        next="https://rickandmortyapi.com/api/character?page=2",
        prev=None
    )
    assert [character.id for character in page.results] == [1, 2]
    assert isinstance(page.results, tuple)


def test_page_info_optional_links():
    """Test that next and prev may be absent."""
    info = PageInfo.from_dict({"count": 1, "pages": 1})

    assert info.next is None
    assert info.prev is None


def test_result_variants():
    """Test the Success and Failure result types."""
    success = Success([1, 2])
    failure = Failure("No internet connection")

    assert success.data == [1, 2]
    assert failure.message == "No internet connection"
    assert success != Success([1])
    assert failure == Failure("No internet connection")
