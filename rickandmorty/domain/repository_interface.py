"""Repository interface (port) for character data access.

This is the port that callers depend on; results are always wrapped in an
``ApiResult`` so no exception crosses this boundary.
"""
from abc import ABC, abstractmethod
from typing import List
from rickandmorty.domain.models import Character
from rickandmorty.domain.result import ApiResult


class ICharacterRepository(ABC):
    """Abstract interface for accessing characters."""

    @abstractmethod
    async def get_characters(self, load_more: bool = False) -> ApiResult[List[Character]]:
        """Return every character loaded so far.

        Args:
            load_more: If True, fetch the next page

        Returns:
            Success holding the characters, or Failure with an error message
        """
        pass

    @abstractmethod
    async def get_character_by_id(self, character_id: int) -> ApiResult[Character]:
        """Return a single character by ID.

        Args:
            character_id: The unique identifier of the character

        Returns:
            Success holding the character, or Failure with an error message
        """
        pass
