"""Rick and Morty REST API client implementation on top of aiohttp."""
import asyncio
import logging
from typing import Any, Dict, Optional
import aiohttp
from rickandmorty.domain.api_interface import IRickAndMortyApi
from rickandmorty.domain.exceptions import ConnectivityError, DecodeError, ProtocolError
from rickandmorty.domain.models import Character, CharactersPage


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://rickandmortyapi.com/api/"


class RickAndMortyRestClient(IRickAndMortyApi):
    """Rick and Morty REST API client.

    Implements the IRickAndMortyApi port, providing an anti-corruption layer
    between the domain and the API's JSON. Every failure is reported as one
    of ConnectivityError, ProtocolError or DecodeError; nothing is cached
    and nothing is retried.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """Initialize the API client.

        Args:
            base_url: Root URL of the API, e.g. https://rickandmortyapi.com/api/
            timeout: Total timeout for a single request in seconds
            session: Existing session to use; the client will not close it
        """
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session
        self._owns_session = session is None

    async def _init_session(self) -> aiohttp.ClientSession:
        """Create the HTTP session (lazy initialization)."""
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=self._timeout,
                headers={"Accept": "application/json"}
            )
        return self._session

    async def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Perform a GET request and return the decoded JSON body.

        Raises:
            ConnectivityError: The request did not complete
            ProtocolError: The response status is not 2xx
            DecodeError: The body is not valid JSON
        """
        session = await self._init_session()
        url = self._base_url + path
        logger.debug(f"GET {url} params={params}")

        try:
            async with session.get(url, params=params) as response:
                if not 200 <= response.status < 300:
                    logger.warning(f"GET {url} returned HTTP {response.status}")
                    raise ProtocolError(response.status, f"GET {url} returned HTTP {response.status}")

                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    logger.warning(f"GET {url} returned a body that is not JSON: {e}")
                    raise DecodeError(f"Invalid JSON from {url}") from e

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"GET {url} failed: {e!r}")
            raise ConnectivityError(f"Could not reach {url}") from e

    async def fetch_characters_page(self, page: int) -> CharactersPage:
        """Fetch one page of characters.

        Args:
            page: One-based page number

        Returns:
            The page of characters with its pagination info
        """
        if page < 1:
            raise ValueError(f"Page number must be positive, got {page}")

        data = await self._get_json("character", params={"page": page})

        try:
            return CharactersPage.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Unexpected shape for page {page}: {e!r}")
            raise DecodeError(f"Could not decode page {page}") from e

    async def fetch_character(self, character_id: int) -> Character:
        """Fetch a single character by ID.

        Args:
            character_id: The unique identifier of the character

        Returns:
            The character
        """
        data = await self._get_json(f"character/{character_id}")

        try:
            return Character.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Unexpected shape for character {character_id}: {e!r}")
            raise DecodeError(f"Could not decode character {character_id}") from e

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None
