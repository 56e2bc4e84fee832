"""Shared test fixtures."""

from collections.abc import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from anime_quotes.core.config import get_settings
from anime_quotes.core.deps import anime_provider_dep, quote_provider_dep
from anime_quotes.main import create_app


@pytest.fixture
def anime_provider() -> MagicMock:
    """Anime provider double; tests set return values on its coroutines."""
    provider = MagicMock()
    provider.fetch_by_title = AsyncMock()
    provider.fetch_random = AsyncMock()
    return provider


@pytest.fixture
def quote_provider() -> MagicMock:
    """Quote provider double returning no quotes by default."""
    provider = MagicMock()
    provider.fetch_by_title = AsyncMock(return_value=[])
    return provider


@pytest.fixture
def app(anime_provider: MagicMock, quote_provider: MagicMock) -> Iterator[FastAPI]:
    """App with both providers replaced by the doubles above."""
    get_settings.cache_clear()
    application = create_app()
    application.dependency_overrides[anime_provider_dep] = lambda: anime_provider
    application.dependency_overrides[quote_provider_dep] = lambda: quote_provider
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """TestClient without lifespan, so no real HTTP clients are built."""
    return TestClient(app)
