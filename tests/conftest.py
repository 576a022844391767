from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

try:
    from pytest_socket import disable_socket, enable_socket, socket_allow_hosts
except Exception:  # pragma: no cover - pytest_socket optional in some environments
    disable_socket = enable_socket = None  # type: ignore[assignment]
    socket_allow_hosts = None  # type: ignore[assignment]


@pytest.fixture(autouse=True)
def _disable_network(request: pytest.FixtureRequest):
    """Restrict network access while allowing opt-in socket usage."""

    if os.getenv("PYTEST_ALLOW_NETWORK", "0") == "1" or not (
        disable_socket and enable_socket
    ):
        yield
        return

    allow_marker = request.node.get_closest_marker(
        "enable_socket"
    ) or request.node.get_closest_marker("network")
    hosts = ["127.0.0.1", "::1"] if socket_allow_hosts else None

    if allow_marker:
        if hosts:
            socket_allow_hosts(hosts)
        enable_socket()
        try:
            yield
        finally:
            disable_socket()
    else:
        if hosts:
            socket_allow_hosts(hosts)
        disable_socket()
        try:
            yield
        finally:
            enable_socket()


@pytest.fixture
def graph_dump_dir() -> Path:
    """Directory holding one pipe-delimited dump per GA4GH graph table."""

    return Path(__file__).parent / "fixtures" / "graph_dump"


@pytest.fixture(autouse=True)
def _clean_sparql_env(monkeypatch):
    for name in ("SPARQL_ENDPOINT", "SPARQL_TIMEOUT", "RDB2RDF_SQLITE3"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_package_loggers():
    """Drop handlers bound to a test's captured stderr once the test ends."""

    yield
    names = [n for n in logging.root.manager.loggerDict if n.lower().startswith("sparqlrdb")]
    for name in names:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
