from __future__ import annotations

"""Minimal SPARQL HTTP client rendering tabular, JSON or XML results."""

import logging
from typing import Dict, Iterator, Mapping, Optional, Tuple
from urllib.parse import urlsplit, urlunsplit

import requests

from .results import format_json

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60
ACCEPT_JSON = "application/sparql-results+json"
ACCEPT_XML = "application/sparql-results+xml"


def accept_for(fmt: Optional[str]) -> str:
    """``xml`` selects the XML serialisation; everything else asks for JSON."""

    return ACCEPT_XML if fmt == "xml" else ACCEPT_JSON


def split_credentials(url: str) -> Tuple[str, Optional[Tuple[str, str]]]:
    """Strip ``user:pass@`` from ``url`` and return it as a basic-auth pair."""

    parts = urlsplit(url)
    if not parts.username or parts.password is None:
        return url, None
    netloc = parts.hostname or ""
    if ":" in netloc:
        netloc = f"[{netloc}]"
    if parts.port:
        netloc = f"{netloc}:{parts.port}"
    bare = urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))
    return bare, (parts.username, parts.password)


class SPARQLClient:
    """Tiny wrapper around ``requests`` for querying a SPARQL endpoint.

    ``prefixes`` are prepended to every query as sorted ``PREFIX`` lines.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        prefixes: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.endpoint = endpoint
        self.prefixes: Dict[str, str] = dict(prefixes or {})
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self.session = session or requests.Session()
        self._url, self._auth = split_credentials(endpoint)

    @property
    def host(self) -> str:
        return self.endpoint

    def with_prefixes(self, prefixes: Mapping[str, str]) -> "SPARQLClient":
        return SPARQLClient(
            self.endpoint, prefixes=prefixes, timeout=self.timeout, session=self.session
        )

    def prefix_block(self) -> str:
        return "".join(f"PREFIX {k}: <{v}>\n" for k, v in sorted(self.prefixes.items()))

    def _get(self, sparql: str, fmt: Optional[str], *, stream: bool = False) -> requests.Response:
        text = self.prefix_block() + sparql
        logger.debug("SPARQL_ENDPOINT %s (auth: %s)", self._url, bool(self._auth))
        logger.debug("SPARQL_TIMEOUT %s seconds", self.timeout)
        logger.debug("%s", text)
        resp = self.session.get(
            self._url,
            params={"query": text},
            headers={"Accept": accept_for(fmt)},
            auth=self._auth,
            timeout=self.timeout,
            stream=stream,
        )
        if resp.status_code >= 400:
            logger.warning("SPARQL endpoint returned HTTP %s", resp.status_code)
        return resp

    def _table(self, body: str) -> str:
        logger.debug("%s", body)
        result = format_json(body)
        if not result.ok:
            logger.warning("Could not read SPARQL JSON results: %s", result.error)
        return result.text

    def query(self, sparql: str, fmt: Optional[str] = None) -> str:
        """Run ``sparql``; ``fmt`` returns the raw body, ``None`` a TSV table."""

        resp = self._get(sparql, fmt)
        if fmt:
            return resp.text
        return self._table(resp.text)

    def stream(self, sparql: str, fmt: Optional[str] = None) -> Iterator[str]:
        """Like :meth:`query` but yield raw bodies chunk by chunk."""

        if not fmt:
            yield self.query(sparql)
            return
        resp = self._get(sparql, fmt, stream=True)
        try:
            if resp.encoding is None:
                resp.encoding = "utf-8"
            for chunk in resp.iter_content(chunk_size=8192, decode_unicode=True):
                if chunk:
                    yield chunk
        finally:
            resp.close()

    @staticmethod
    def find_query(keyword: str) -> str:
        escaped = keyword.replace("\\", "\\\\").replace("'", "\\'")
        return f"select ?s ?p ?o where {{ ?s ?t '{escaped}'. ?s ?p ?o . }}"

    @staticmethod
    def head_query(limit: int = 20, offset: int = 1) -> str:
        return f"select ?s ?p ?o where {{ ?s ?p ?o . }} offset {int(offset)} limit {int(limit)}"

    def find(self, keyword: str, fmt: Optional[str] = None) -> str:
        """Search literal objects equal to ``keyword``."""
        return self.query(self.find_query(keyword), fmt)

    def iter_find(self, keyword: str, fmt: Optional[str] = None) -> Iterator[str]:
        return self.stream(self.find_query(keyword), fmt)

    def head(self, limit: int = 20, offset: int = 1, fmt: Optional[str] = None) -> str:
        """Peek at triples in the store."""
        return self.query(self.head_query(limit, offset), fmt)

    def iter_head(self, limit: int = 20, offset: int = 1, fmt: Optional[str] = None) -> Iterator[str]:
        return self.stream(self.head_query(limit, offset), fmt)

    def close(self) -> None:
        self.session.close()


__all__ = [
    "DEFAULT_TIMEOUT",
    "ACCEPT_JSON",
    "ACCEPT_XML",
    "accept_for",
    "split_credentials",
    "SPARQLClient",
]
