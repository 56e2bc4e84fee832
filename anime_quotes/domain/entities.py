from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Quote:
    title: str
    character: str
    text: str


@dataclass(frozen=True)
class Anime:
    id: int
    title: str
    url: str | None = None
    image_url: str | None = None
    synopsis: str | None = None
    episodes: int | None = None
    score: float | None = None
    status: str | None = None
    year: int | None = None
    genres: tuple[str, ...] = ()
    quotes: tuple[Quote, ...] = ()


@dataclass(frozen=True)
class Pagination:
    has_next_page: bool
    current_page: int


@dataclass(frozen=True)
class AnimePage:
    """One page of unvalidated anime records as returned by the anime provider."""

    data: list[Any]
    pagination: Pagination


@dataclass(frozen=True)
class AnimeBatch:
    data: list[Anime]
    pagination: Pagination
