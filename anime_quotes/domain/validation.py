"""Schema checks for raw provider records.

Each validator takes one loosely typed record and returns its canonical,
renamed shape, or ``None`` when the record does not match. Callers drop
rejected records one by one, so a single malformed item never takes its
siblings down with it.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from urllib.parse import urlparse

from pydantic import AliasPath, BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError, field_validator

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class QuoteData(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    title: StrictStr = Field(validation_alias="anime")
    character: StrictStr
    text: StrictStr = Field(validation_alias="quote")


class AnimeData(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: StrictInt = Field(validation_alias="mal_id")
    title: StrictStr
    url: str | None = None
    image_url: str | None = Field(default=None, validation_alias=AliasPath("images", "jpg", "image_url"))
    synopsis: str | None = None
    episodes: int | None = None
    score: float | None = None
    status: str | None = None
    year: int | None = None
    genres: list[str] = Field(default_factory=list)

    @field_validator("url", "image_url", mode="after")
    @classmethod
    def _http_link(cls, v: str | None) -> str | None:
        # only absolute http(s) links are kept
        if v is None:
            return None
        link = v.strip()
        parsed = urlparse(link)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            return None
        if len(link) > 2048 or any(ch.isspace() for ch in link):
            return None
        return link

    @field_validator("genres", mode="before")
    @classmethod
    def _genre_names(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, list):
            return [g["name"] for g in v if isinstance(g, dict) and isinstance(g.get("name"), str)]
        return v


def validate_quote(raw: Any) -> QuoteData | None:
    return _safe_validate(QuoteData, raw)


def validate_anime(raw: Any) -> AnimeData | None:
    return _safe_validate(AnimeData, raw)


def _safe_validate(model: type[M], raw: Any) -> M | None:
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        logger.debug(
            "record_rejected",
            extra={"schema": model.__name__, "errors": exc.error_count()},
        )
        return None
