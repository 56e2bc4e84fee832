from __future__ import annotations

from fastapi import APIRouter, Request

from anime_quotes.api.v1.routes.anime import router as anime_router
from anime_quotes.domain.schemas import HealthResponse

router = APIRouter()
router.include_router(anime_router, tags=["anime"])


@router.get("/healthz", response_model=HealthResponse, tags=["health"])
async def healthz(request: Request) -> HealthResponse:
    """Reports whether both provider adapters were wired at startup."""
    state = request.app.state
    providers = {
        "anime": getattr(state, "anime_provider", None) is not None,
        "quotes": getattr(state, "quote_provider", None) is not None,
    }
    return HealthResponse(status="ok" if all(providers.values()) else "degraded", providers=providers)
