from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from anime_quotes.core.deps import anime_quote_service_dep
from anime_quotes.core.result import Failure
from anime_quotes.domain.schemas import (
    AnimeListResponse,
    AnimeOut,
    AnimeResponse,
    ErrorResponse,
    PaginationOut,
)
from anime_quotes.services.anime_quote_service import AnimeQuoteService

router = APIRouter()


@router.get(
    "/anime",
    response_model=AnimeListResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_anime_by_title(
    title: str = Query(..., max_length=256),
    service: AnimeQuoteService = Depends(anime_quote_service_dep),
) -> AnimeListResponse:
    result = await service.resolve_by_title(title)
    if isinstance(result, Failure):
        raise result.error

    batch = result.value
    return AnimeListResponse(
        data=[AnimeOut.from_entity(a) for a in batch.data],
        pagination=PaginationOut.from_entity(batch.pagination),
    )


@router.get(
    "/anime/random",
    response_model=AnimeResponse,
    responses={404: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def get_random_anime(
    service: AnimeQuoteService = Depends(anime_quote_service_dep),
) -> AnimeResponse:
    result = await service.resolve_random()
    if isinstance(result, Failure):
        raise result.error

    return AnimeResponse(data=AnimeOut.from_entity(result.value))
