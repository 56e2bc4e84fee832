from __future__ import annotations

from collections.abc import Sequence

from anime_quotes.domain.entities import Anime, Quote
from anime_quotes.domain.validation import AnimeData, QuoteData


def create_quote(data: QuoteData) -> Quote:
    return Quote(title=data.title, character=data.character, text=data.text)


def create_anime(data: AnimeData, quotes: Sequence[Quote]) -> Anime:
    return Anime(
        id=data.id,
        title=data.title,
        url=data.url,
        image_url=data.image_url,
        synopsis=data.synopsis,
        episodes=data.episodes,
        score=data.score,
        status=data.status,
        year=data.year,
        genres=tuple(data.genres),
        quotes=tuple(quotes),
    )
