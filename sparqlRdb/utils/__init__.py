"""Utility helpers for sparqlRdb."""

from __future__ import annotations

import logging

__all__ = ["configure_logging"]


def configure_logging(debug: bool = False) -> None:
    """Send package log records to stderr; ``debug`` lowers the threshold."""

    level = logging.DEBUG if debug else logging.WARNING
    logger = logging.getLogger("sparqlRdb")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)
