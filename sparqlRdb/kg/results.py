from __future__ import annotations

"""Render SPARQL-results JSON as tab-separated text."""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

_EMPTY_BINDING: Dict[str, str] = {"type": "", "value": ""}


@dataclass(frozen=True)
class TableResult:
    """Outcome of :func:`format_json`.

    ``error`` is set when the payload could not be read; ``text`` is then
    empty.
    """

    text: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        return self.text


def _render(binding: Dict[str, Any]) -> str:
    value = str(binding.get("value", ""))
    if binding.get("type") == "uri":
        return "<" + value.replace("\\", "") + ">"
    return value.replace("\\/", "/")


def format_json(body: Union[str, bytes]) -> TableResult:
    """Convert a SPARQL-results JSON document to a header line plus TSV rows."""

    try:
        data = json.loads(body)
        head = list(data["head"]["vars"])
        rows = data["results"]["bindings"]
    except (ValueError, TypeError, KeyError) as exc:
        return TableResult("", error=f"{type(exc).__name__}: {exc}")
    if not all(isinstance(var, str) for var in head):
        return TableResult("", error=f"head.vars must be strings: {head!r}")

    lines = ["\t".join(head)]
    try:
        for result in rows:
            lines.append("\t".join(_render(result.get(var) or _EMPTY_BINDING) for var in head))
    except (AttributeError, TypeError) as exc:
        return TableResult("", error=f"{type(exc).__name__}: {exc}")
    return TableResult("\n".join(lines) + "\n")


def format_table(body: Union[str, bytes]) -> str:
    return format_json(body).text


__all__ = ["TableResult", "format_json", "format_table"]
