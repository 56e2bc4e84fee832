from __future__ import annotations

from typing import Any, Protocol

from anime_quotes.domain.entities import AnimePage


class AnimeProvider(Protocol):
    async def fetch_by_title(self, title: str) -> AnimePage:
        ...

    async def fetch_random(self) -> Any | None:
        ...
