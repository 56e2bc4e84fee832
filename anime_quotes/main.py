from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from anime_quotes.api.v1.router import router as v1_router
from anime_quotes.core.config import Settings, get_settings
from anime_quotes.core.exception_handlers import register_exception_handlers
from anime_quotes.core.logging import setup_logging
from anime_quotes.core.middleware.request_id import RequestIdMiddleware
from anime_quotes.infrastructure.providers.animechan_client import AnimechanQuoteProvider
from anime_quotes.infrastructure.providers.jikan_client import JikanAnimeProvider

logger = logging.getLogger(__name__)


def _provider_http_client(base_url: str, *, timeout_seconds: float, max_connections: int) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(timeout_seconds),
        headers={"Accept": "application/json"},
        limits=httpx.Limits(max_connections=max_connections),
    )


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = app.state.settings
    jikan_http = _provider_http_client(
        str(settings.jikan_base_url),
        timeout_seconds=settings.jikan_timeout_seconds,
        max_connections=settings.http_max_connections,
    )
    animechan_http = _provider_http_client(
        str(settings.animechan_base_url),
        timeout_seconds=settings.animechan_timeout_seconds,
        max_connections=settings.http_max_connections,
    )

    async with jikan_http, animechan_http:
        app.state.anime_provider = JikanAnimeProvider(
            http_client=jikan_http,
            timeout_seconds=settings.jikan_timeout_seconds,
        )
        app.state.quote_provider = AnimechanQuoteProvider(
            http_client=animechan_http,
            timeout_seconds=settings.animechan_timeout_seconds,
            api_key=settings.animechan_api_key_plain(),
        )
        logger.info(
            "providers_ready",
            extra={"anime_provider": str(jikan_http.base_url), "quote_provider": str(animechan_http.base_url)},
        )
        yield


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
        lifespan=_lifespan,
    )
    app.state.settings = settings

    register_exception_handlers(app)

    origins = settings.cors_origins()
    if origins:
        app.add_middleware(CORSMiddleware, allow_origins=origins, allow_methods=["GET"], allow_headers=["X-Request-ID"])
    app.add_middleware(RequestIdMiddleware)

    app.include_router(v1_router, prefix=settings.api_v1_prefix)
    return app


app = create_app()
