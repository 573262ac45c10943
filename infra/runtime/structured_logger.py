from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from typing import Any, TextIO


class StructuredLogger:
    """JSON-lines logger; writes to stderr unless a stream is given."""

    def __init__(self, stream: TextIO | None = None, *, component: str | None = None) -> None:
        self._stream = stream
        self._component = component

    def info(self, message: str, /, **fields: Any) -> None:
        self._emit("info", message, fields)

    def warning(self, message: str, /, **fields: Any) -> None:
        self._emit("warning", message, fields)

    def error(self, message: str, /, **fields: Any) -> None:
        self._emit("error", message, fields)

    def _emit(self, level: str, message: str, fields: dict[str, Any]) -> None:
        payload: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "message": message,
            "fields": fields,
        }
        if self._component:
            payload["component"] = self._component
        stream = self._stream if self._stream is not None else sys.stderr
        print(json.dumps(payload, sort_keys=True, default=str), file=stream)
