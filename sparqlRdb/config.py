from __future__ import annotations

"""Environment-driven settings for the ``sparql`` and ``rdb2rdf`` commands."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

ENDPOINT_ENV = "SPARQL_ENDPOINT"
TIMEOUT_ENV = "SPARQL_TIMEOUT"
SQLITE3_ENV = "RDB2RDF_SQLITE3"

DEFAULT_ENDPOINT = "https://sparql.uniprot.org/sparql"


@dataclass
class ClientConfig:
    endpoint: str = DEFAULT_ENDPOINT
    timeout: Optional[int] = None
    sqlite3: str = "sqlite3"


def _parse_timeout(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r", TIMEOUT_ENV, raw)
        return None


def load_config(environ: Optional[Mapping[str, str]] = None) -> ClientConfig:
    env = os.environ if environ is None else environ
    return ClientConfig(
        endpoint=env.get(ENDPOINT_ENV) or DEFAULT_ENDPOINT,
        timeout=_parse_timeout(env.get(TIMEOUT_ENV)),
        sqlite3=env.get(SQLITE3_ENV) or "sqlite3",
    )


__all__ = [
    "ENDPOINT_ENV",
    "TIMEOUT_ENV",
    "SQLITE3_ENV",
    "DEFAULT_ENDPOINT",
    "ClientConfig",
    "load_config",
]
