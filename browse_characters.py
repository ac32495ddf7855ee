"""Main entry point for browsing Rick and Morty characters.

Loads the first page of characters, optionally more pages and a single
character, through the cache-backed repository.
"""
import asyncio
import os
import sys
import logging
from dotenv import load_dotenv
from rickandmorty.infrastructure.rest_client import DEFAULT_BASE_URL, RickAndMortyRestClient
from rickandmorty.application.character_repository import CachedCharacterRepository
from rickandmorty.domain.result import Failure

# Load environment variables from .env or env file
load_dotenv('.env') or load_dotenv('env')


logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def main():
    """Execute the browsing session."""
    base_url = os.getenv("RICK_AND_MORTY_API_URL", DEFAULT_BASE_URL)
    timeout = float(os.getenv("REQUEST_TIMEOUT", "10"))
    pages_to_load = max(int(os.getenv("PAGES_TO_LOAD", "1")), 1)
    character_id = os.getenv("CHARACTER_ID")

    logger.info(f"Browsing characters from {base_url} ({pages_to_load} page(s))")

    api = RickAndMortyRestClient(base_url=base_url, timeout=timeout)
    repository = CachedCharacterRepository(api)

    try:
        result = await repository.get_characters()
        for _ in range(pages_to_load - 1):
            if isinstance(result, Failure) or not repository.has_more_pages:
                break
            result = await repository.get_characters(load_more=True)

        if isinstance(result, Failure):
            logger.error(f"Could not load characters: {result.message}")
            sys.exit(1)

        logger.info("=" * 50)
        logger.info(f"Characters loaded: {len(result.data)}")
        logger.info(f"  Page: {repository.current_page}/{repository.total_pages}")
        for character in result.data:
            logger.info(
                f"  #{character.id} {character.name} - "
                f"{character.status.label}, {character.species}, {character.gender.label}"
            )
        logger.info("=" * 50)

        if character_id:
            detail = await repository.get_character_by_id(int(character_id))
            if isinstance(detail, Failure):
                logger.error(f"Could not load character {character_id}: {detail.message}")
                sys.exit(1)

            character = detail.data
            logger.info(f"Character #{character.id}: {character.name}")
            logger.info(f"  Status: {character.status.label}")
            logger.info(f"  Species: {character.species} {character.type}".rstrip())
            logger.info(f"  Gender: {character.gender.label}")
            logger.info(f"  Origin: {character.origin.name}")
            logger.info(f"  Last known location: {character.location.name}")
            logger.info(f"  Image: {character.image}")

    except Exception as e:
        logger.error(f"Browsing failed: {e}", exc_info=True)
        sys.exit(1)
    finally:
        await api.close()


if __name__ == "__main__":
    asyncio.run(main())
