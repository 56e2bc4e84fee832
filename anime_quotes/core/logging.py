from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime, timezone
from typing import Any

from anime_quotes.core.config import Settings
from anime_quotes.core.middleware.request_id import request_id_var

# Attributes present on every LogRecord; anything else arrived via ``extra``.
_BUILTIN_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "request_id"}

_API_KEY_RE = re.compile(r"(?i)(api[_-]?key=|x-api-key[\"']?\s*[:=]\s*[\"']?)([^\s&\"',}]+)")


def _redact(value: Any) -> Any:
    if isinstance(value, str):
        return _API_KEY_RE.sub(r"\1***", value)
    if isinstance(value, dict):
        return {str(k): _redact(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_redact(v) for v in value]
    return value


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line: fixed fields first, then ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": _redact(record.getMessage()),
            "request_id": getattr(record, "request_id", "-"),
        }
        entry.update(
            (key, _redact(value))
            for key, value in vars(record).items()
            if key not in _BUILTIN_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            entry["exc"] = _redact(self.formatException(record.exc_info))
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(settings: Settings) -> None:
    level = logging.getLevelNamesMapping().get(settings.log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.addFilter(RequestIdFilter())
    if settings.log_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] [%(request_id)s] %(message)s"))

    logging.basicConfig(level=level, handlers=[handler], force=True)

    # uvicorn ships its own handlers; send its records through ours instead
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    # httpx logs every outgoing request at INFO
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
