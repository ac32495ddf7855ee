"""Shared fixtures for the test suite."""
from typing import Any, Dict
from unittest.mock import AsyncMock

import pytest

from rickandmorty.application.character_repository import CachedCharacterRepository
from rickandmorty.domain.api_interface import IRickAndMortyApi
from factories import character_payload


@pytest.fixture
def rick_payload() -> Dict[str, Any]:
    return character_payload(1)


@pytest.fixture
def api() -> AsyncMock:
    """Mocked API client; every method is an AsyncMock."""
    return AsyncMock(spec=IRickAndMortyApi)


@pytest.fixture
def repository(api: AsyncMock) -> CachedCharacterRepository:
    return CachedCharacterRepository(api)
