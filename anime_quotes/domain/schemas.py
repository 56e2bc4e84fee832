from __future__ import annotations

from pydantic import BaseModel, Field

from anime_quotes.domain.entities import Anime, Pagination, Quote


class QuoteOut(BaseModel):
    title: str
    character: str
    text: str

    @classmethod
    def from_entity(cls, quote: Quote) -> "QuoteOut":
        return cls(title=quote.title, character=quote.character, text=quote.text)


class AnimeOut(BaseModel):
    id: int
    title: str
    url: str | None = None
    image_url: str | None = None
    synopsis: str | None = None
    episodes: int | None = None
    score: float | None = None
    status: str | None = None
    year: int | None = None
    genres: list[str] = Field(default_factory=list)
    quotes: list[QuoteOut] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, anime: Anime) -> "AnimeOut":
        return cls(
            id=anime.id,
            title=anime.title,
            url=anime.url,
            image_url=anime.image_url,
            synopsis=anime.synopsis,
            episodes=anime.episodes,
            score=anime.score,
            status=anime.status,
            year=anime.year,
            genres=list(anime.genres),
            quotes=[QuoteOut.from_entity(q) for q in anime.quotes],
        )


class PaginationOut(BaseModel):
    has_next_page: bool
    current_page: int

    @classmethod
    def from_entity(cls, pagination: Pagination) -> "PaginationOut":
        return cls(has_next_page=pagination.has_next_page, current_page=pagination.current_page)


class AnimeListResponse(BaseModel):
    data: list[AnimeOut]
    pagination: PaginationOut


class AnimeResponse(BaseModel):
    data: AnimeOut


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    error: ErrorDetail
    request_id: str


class HealthResponse(BaseModel):
    status: str
    providers: dict[str, bool]
