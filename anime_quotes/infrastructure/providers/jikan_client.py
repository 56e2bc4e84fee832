from __future__ import annotations

import asyncio
from typing import Any

import httpx

from anime_quotes.domain.entities import AnimePage, Pagination
from anime_quotes.domain.ports.anime_provider import AnimeProvider


class JikanAnimeProvider(AnimeProvider):
    """Anime metadata from the Jikan (MyAnimeList) REST API."""

    def __init__(self, *, http_client: httpx.AsyncClient, timeout_seconds: float) -> None:
        self._client = http_client
        self._timeout = float(timeout_seconds)

    async def fetch_by_title(self, title: str) -> AnimePage:
        payload = await self._get_json("/anime", params={"q": title})

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, list):
            raise ValueError("invalid jikan search response")

        return AnimePage(data=data, pagination=_parse_pagination(payload.get("pagination")))

    async def fetch_random(self) -> Any | None:
        payload = await self._get_json("/random/anime")
        if not isinstance(payload, dict):
            raise ValueError("invalid jikan random response")
        return payload.get("data")

    async def _get_json(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        resp = await asyncio.wait_for(self._client.get(path, params=params), timeout=self._timeout)
        resp.raise_for_status()
        return resp.json()


def _parse_pagination(raw: Any) -> Pagination:
    if not isinstance(raw, dict):
        raise ValueError("missing jikan pagination")

    has_next_page = raw.get("has_next_page")
    current_page = raw.get("current_page")
    if not isinstance(has_next_page, bool):
        raise ValueError("invalid jikan pagination: has_next_page")
    if not isinstance(current_page, int) or isinstance(current_page, bool):
        raise ValueError("invalid jikan pagination: current_page")

    return Pagination(has_next_page=has_next_page, current_page=current_page)
