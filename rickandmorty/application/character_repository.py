"""Cache-backed character repository.

Serves characters from an in-memory cache, fetching pages from the API only
when needed, and turns every API failure into a ``Failure`` result.
"""
import asyncio
import logging
from typing import Dict, List, Optional
from rickandmorty.domain.api_interface import IRickAndMortyApi
from rickandmorty.domain.exceptions import ConnectivityError, ProtocolError
from rickandmorty.domain.models import Character
from rickandmorty.domain.repository_interface import ICharacterRepository
from rickandmorty.domain.result import ApiResult, Failure, Success


logger = logging.getLogger(__name__)

NO_CONNECTION_MESSAGE = "No internet connection"
HTTP_ERROR_MESSAGE = "HTTP error: {code}"
UNEXPECTED_ERROR_MESSAGE = "Unexpected error occurred"


class CachedCharacterRepository(ICharacterRepository):
    """Default implementation of ICharacterRepository.

    Uses an IRickAndMortyApi to fetch characters and keeps every character
    it has seen in memory for the lifetime of the instance. Pages are
    requested one at a time through ``get_characters(load_more=True)``.

    Cache and pagination cursor are only written after a successful API
    call, so a failed or cancelled call leaves them as they were. Public
    operations are serialised with a lock, making the instance safe to share
    between tasks on the same event loop.
    """

    def __init__(self, api: IRickAndMortyApi):
        """Initialize the repository.

        Args:
            api: Rick and Morty API client implementation
        """
        self._api = api
        self._current_page: int = 1
        self._total_pages: Optional[int] = None
        self._characters_cache: Dict[int, Character] = {}
        self._lock = asyncio.Lock()

    @property
    def current_page(self) -> int:
        """The last page requested from the API (1 before any request)."""
        return self._current_page

    @property
    def total_pages(self) -> Optional[int]:
        """Total page count, or None until the first page is loaded."""
        return self._total_pages

    @property
    def cached_count(self) -> int:
        return len(self._characters_cache)

    @property
    def has_more_pages(self) -> bool:
        """True unless the last known page has already been loaded."""
        if self._total_pages is None:
            return True
        return self._current_page < self._total_pages

    async def get_characters(self, load_more: bool = False) -> ApiResult[List[Character]]:
        """Fetch characters from the API or the memory cache.

        The API is called only when the cache is empty or ``load_more`` is
        set. The page number advances by one per ``load_more`` call until
        the last page; after that the last page is requested again. Before
        the first page is known, ``load_more`` does not advance and page 1
        is requested.

        Args:
            load_more: If True, fetch the next page

        Returns:
            Success holding every cached character, or Failure with an error message
        """
        async with self._lock:
            if self._characters_cache and not load_more:
                logger.debug(f"Serving {len(self._characters_cache)} characters from cache")
                return Success(list(self._characters_cache.values()))

            page = self._current_page
            if load_more and page < (self._total_pages or 0):
                page += 1

            try:
                response = await self._api.fetch_characters_page(page)
            except ConnectivityError as e:
                logger.error(f"Failed to load page {page}: {e}", exc_info=True)
                return Failure(NO_CONNECTION_MESSAGE)
            except ProtocolError as e:
                logger.error(f"Failed to load page {page}: {e}", exc_info=True)
                return Failure(HTTP_ERROR_MESSAGE.format(code=e.status_code))
            except Exception as e:
                logger.error(f"Failed to load page {page}: {e}", exc_info=True)
                return Failure(UNEXPECTED_ERROR_MESSAGE)

            self._current_page = page
            if self._total_pages is None:
                self._total_pages = response.info.pages
            self._characters_cache.update(
                (character.id, character) for character in response.results
            )

            logger.info(
                f"Loaded page {page}/{self._total_pages} "
                f"({len(response.results)} characters, {len(self._characters_cache)} cached)"
            )

            return Success(list(self._characters_cache.values()))

    async def get_character_by_id(self, character_id: int) -> ApiResult[Character]:
        """Fetch a single character by ID from the memory cache or the API.

        Args:
            character_id: The unique identifier of the character

        Returns:
            Success holding the character, or Failure with an error message
        """
        async with self._lock:
            cached = self._characters_cache.get(character_id)
            if cached is not None:
                logger.debug(f"Cache hit for character {character_id}")
                return Success(cached)

            logger.debug(f"Cache miss for character {character_id}")

            try:
                character = await self._api.fetch_character(character_id)
            except ConnectivityError as e:
                logger.error(f"Failed to load character {character_id}: {e}", exc_info=True)
                return Failure(NO_CONNECTION_MESSAGE)
            except ProtocolError as e:
                logger.error(f"Failed to load character {character_id}: {e}", exc_info=True)
                return Failure(HTTP_ERROR_MESSAGE.format(code=e.status_code))
            except Exception as e:
                logger.error(f"Failed to load character {character_id}: {e}", exc_info=True)
                return Failure(UNEXPECTED_ERROR_MESSAGE)

            self._characters_cache[character_id] = character
            return Success(character)
