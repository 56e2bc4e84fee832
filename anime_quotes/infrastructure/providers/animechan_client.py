from __future__ import annotations

import asyncio
from typing import Any

import httpx

from anime_quotes.domain.ports.quote_provider import QuoteProvider


class AnimechanQuoteProvider(QuoteProvider):
    """Character quotes from the Animechan API."""

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient,
        timeout_seconds: float,
        api_key: str | None = None,
    ) -> None:
        self._client = http_client
        self._timeout = float(timeout_seconds)
        self._headers = {"x-api-key": api_key} if api_key else {}

    async def fetch_by_title(self, title: str) -> list[Any]:
        resp = await asyncio.wait_for(
            self._client.get("/quotes/anime", params={"title": title}, headers=self._headers),
            timeout=self._timeout,
        )
        resp.raise_for_status()

        payload = resp.json()
        # newer deployments wrap the array in {"status": ..., "data": [...]}
        if isinstance(payload, dict):
            payload = payload.get("data")
        if not isinstance(payload, list):
            raise ValueError("invalid animechan response")
        return payload
