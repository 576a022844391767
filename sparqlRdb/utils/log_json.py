from __future__ import annotations

"""Structured JSON logger for conversion progress on stderr."""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Mapping, MutableMapping

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _sanitize(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {str(k): _sanitize(v) for k, v in obj.items() if v is not None}
    if isinstance(obj, (list, tuple)):
        return [_sanitize(v) for v in obj]
    if isinstance(obj, (int, float, bool)) or obj is None:
        return obj
    return str(obj)


def _truncate(details: Mapping[str, Any], max_bytes: int) -> Any:
    if max_bytes <= 0:
        return details
    serialized = json.dumps(details, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
    blob = serialized.encode("utf-8")
    if len(blob) <= max_bytes:
        return details
    preview = blob[:max_bytes].decode("utf-8", errors="ignore")
    return {"note": "truncated", "preview": preview}


class JsonLogger:
    """Emit structured JSON events with consistent keys."""

    def __init__(
        self,
        service: str,
        *,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
        max_details_bytes: int = 4096,
    ) -> None:
        self._service = service
        self._logger = logger or logging.getLogger(f"sparqlrdb.{service}.json")
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            self._logger.addHandler(handler)
        self._logger.propagate = False
        self._logger.setLevel(level)
        self._max_details_bytes = max(0, int(max_details_bytes))

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def info(self, event: str, **fields: Any) -> dict[str, Any]:
        return self._emit("INFO", event, fields)

    def warning(self, event: str, **fields: Any) -> dict[str, Any]:
        return self._emit("WARNING", event, fields)

    def error(self, event: str, **fields: Any) -> dict[str, Any]:
        return self._emit("ERROR", event, fields)

    def _emit(self, level: str, event: str, fields: MutableMapping[str, Any]) -> dict[str, Any]:
        entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "service": self._service,
            "event": event,
        }
        for key in ("table", "status"):
            value = fields.pop(key, None)
            if value is not None:
                entry[key] = value
        if fields:
            entry["details"] = _truncate(_sanitize(dict(fields)), self._max_details_bytes)
        payload = json.dumps(entry, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
        self._logger.log(_LEVEL_MAP.get(level, logging.INFO), payload)
        return entry


__all__ = ["JsonLogger"]
