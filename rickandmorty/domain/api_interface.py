"""Rick and Morty API interface (port) for fetching character data.

This is the anti-corruption layer that shields the domain from the REST API specifics.
"""
from abc import ABC, abstractmethod
from rickandmorty.domain.models import Character, CharactersPage


class IRickAndMortyApi(ABC):
    """Abstract interface for Rick and Morty API operations.

    Implementations raise the errors from ``rickandmorty.domain.exceptions``
    and never cache or retry.
    """

    @abstractmethod
    async def fetch_characters_page(self, page: int) -> CharactersPage:
        """Fetch one page of characters.

        Args:
            page: One-based page number

        Returns:
            The page of characters with its pagination info

        Raises:
            ConnectivityError: The API could not be reached
            ProtocolError: The API returned a non-success status
            DecodeError: The response could not be parsed
        """
        pass

    @abstractmethod
    async def fetch_character(self, character_id: int) -> Character:
        """Fetch a single character by ID.

        Raises the same errors as ``fetch_characters_page``.
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections."""
        pass
