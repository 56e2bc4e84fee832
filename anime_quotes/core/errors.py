from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppError(Exception):
    code: str
    http_status: int
    log_detail: str | None = None

    def __str__(self) -> str:
        return self.log_detail or self.code


class AnimeNotFoundError(AppError):
    """The anime provider could not be reached or answered with an error."""

    def __init__(self, log_detail: str | None = None) -> None:
        super().__init__(code="anime_not_found", http_status=404, log_detail=log_detail)


class AnimeParseError(AppError):
    """The anime provider answered, but its record failed validation."""

    def __init__(self, log_detail: str | None = None) -> None:
        super().__init__(code="anime_parse_failed", http_status=502, log_detail=log_detail)


_PUBLIC_MESSAGES: dict[str, str] = {
    "anime_not_found": "Anime not found.",
    "anime_parse_failed": "Anime provider returned an unreadable record.",
    "request_invalid": "Invalid request.",
    "not_found": "Resource not found.",
    "method_not_allowed": "Method not allowed.",
    "internal_error": "Internal service error.",
}


def public_message(code: str) -> str:
    return _PUBLIC_MESSAGES.get(code, _PUBLIC_MESSAGES["internal_error"])
