from __future__ import annotations

from typing import Any, Protocol


class QuoteProvider(Protocol):
    async def fetch_by_title(self, title: str) -> list[Any]:
        ...
