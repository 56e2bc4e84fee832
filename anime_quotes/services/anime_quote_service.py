from __future__ import annotations

import asyncio
import logging
from typing import Any

from anime_quotes.core.errors import AnimeNotFoundError, AnimeParseError, AppError
from anime_quotes.core.result import Result, failure, success
from anime_quotes.domain.entities import Anime, AnimeBatch, AnimePage, Quote
from anime_quotes.domain.factories import create_anime, create_quote
from anime_quotes.domain.ports.anime_provider import AnimeProvider
from anime_quotes.domain.ports.quote_provider import QuoteProvider
from anime_quotes.domain.validation import validate_anime, validate_quote

logger = logging.getLogger(__name__)


class AnimeQuoteService:
    """Combines anime records with character quotes from two providers.

    The anime provider is primary: when it fails the whole call fails. The
    quote provider is secondary: any failure there degrades to no quotes.
    Provider failures come back as ``Failure`` values, never as exceptions.
    """

    def __init__(self, *, anime_provider: AnimeProvider, quote_provider: QuoteProvider) -> None:
        self._anime = anime_provider
        self._quotes = quote_provider

    async def resolve_by_title(self, title: str) -> Result[AppError, AnimeBatch]:
        # Both fetches settle before either outcome is looked at.
        anime_outcome, quote_outcome = await asyncio.gather(
            self._anime.fetch_by_title(title),
            self._quotes.fetch_by_title(title),
            return_exceptions=True,
        )

        # a failed fetch, or a provider that broke its contract
        if not isinstance(anime_outcome, AnimePage):
            logger.info(
                "anime_by_title_failed",
                extra={"search_title": title, "reason": repr(anime_outcome)},
            )
            return failure(AnimeNotFoundError("anime by title not found"))

        if isinstance(quote_outcome, BaseException):
            logger.warning(
                "quote_fetch_degraded",
                extra={"search_title": title, "reason": repr(quote_outcome)},
            )
            quote_outcome = []

        page = anime_outcome
        # The same quotes go on every anime in the page; there is no
        # per-anime matching.
        quotes = _build_quotes(quote_outcome)

        animes: list[Anime] = []
        for raw in page.data:
            parsed = validate_anime(raw)
            if parsed is None:
                continue
            animes.append(create_anime(parsed, quotes))

        return success(
            AnimeBatch(
                data=animes,
                pagination=page.pagination,
            )
        )

    async def resolve_random(self) -> Result[AppError, Anime]:
        try:
            raw = await self._anime.fetch_random()
        except Exception as exc:  # noqa: BLE001
            logger.info("random_anime_failed", extra={"reason": repr(exc)})
            return failure(AnimeNotFoundError("random anime not found"))

        if not raw:
            return failure(AnimeNotFoundError("random anime not found"))

        parsed = validate_anime(raw)
        if parsed is None:
            logger.warning("random_anime_unparseable")
            return failure(AnimeParseError("failed to parse random anime"))

        try:
            quote_outcome = await self._quotes.fetch_by_title(parsed.title)
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "quote_fetch_degraded",
                extra={"search_title": parsed.title, "reason": repr(exc)},
            )
            quote_outcome = []

        return success(create_anime(parsed, _build_quotes(quote_outcome)))


def _build_quotes(raw_quotes: Any) -> tuple[Quote, ...]:
    if not raw_quotes or not isinstance(raw_quotes, (list, tuple)):
        return ()

    out: list[Quote] = []
    for raw in raw_quotes:
        parsed = validate_quote(raw)
        if parsed is None:
            continue
        out.append(create_quote(parsed))
    return tuple(out)
