from __future__ import annotations

from fastapi import Depends, Request

from anime_quotes.domain.ports.anime_provider import AnimeProvider
from anime_quotes.domain.ports.quote_provider import QuoteProvider
from anime_quotes.services.anime_quote_service import AnimeQuoteService


def anime_provider_dep(request: Request) -> AnimeProvider:
    provider: AnimeProvider | None = getattr(request.app.state, "anime_provider", None)
    if provider is None:
        raise RuntimeError("Anime provider is not initialized")
    return provider


def quote_provider_dep(request: Request) -> QuoteProvider:
    provider: QuoteProvider | None = getattr(request.app.state, "quote_provider", None)
    if provider is None:
        raise RuntimeError("Quote provider is not initialized")
    return provider


def anime_quote_service_dep(
    anime_provider: AnimeProvider = Depends(anime_provider_dep),
    quote_provider: QuoteProvider = Depends(quote_provider_dep),
) -> AnimeQuoteService:
    return AnimeQuoteService(anime_provider=anime_provider, quote_provider=quote_provider)
