from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from anime_quotes.core.errors import AppError, public_message

logger = logging.getLogger(__name__)

_HTTP_STATUS_CODES = {404: "not_found", 405: "method_not_allowed"}


def _error_response(request: Request, *, status_code: int, code: str) -> JSONResponse:
    rid = getattr(request.state, "request_id", None) or "-"
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": code, "message": public_message(code)}, "request_id": rid},
    )


async def _on_app_error(request: Request, exc: AppError) -> JSONResponse:
    # anime_parse_failed (502) logs at WARNING
    level = logging.WARNING if exc.http_status >= 500 else logging.INFO
    logger.log(level, "app_error", extra={"code": exc.code, "detail": str(exc)})
    return _error_response(request, status_code=exc.http_status, code=exc.code)


async def _on_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = _HTTP_STATUS_CODES.get(exc.status_code, "request_invalid")
    return _error_response(request, status_code=exc.status_code, code=code)


async def _on_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("request_invalid", extra={"errors": len(exc.errors())})
    return _error_response(request, status_code=422, code="request_invalid")


async def _on_unhandled(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_exception", exc_info=exc)
    return _error_response(request, status_code=500, code="internal_error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, _on_app_error)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _on_http_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _on_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _on_unhandled)
