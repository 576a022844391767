"""SPARQL client and relational-to-RDF conversion."""

__all__ = [
    "SPARQLClient",
    "TableResult",
    "format_json",
    "TripleEmitter",
    "ValidationError",
    "REGISTRY",
    "TABLES",
    "get_rule",
    "RDBDump",
    "Dump2RDF",
]

from .sparql import SPARQLClient
from .results import TableResult, format_json
from .emitter import TripleEmitter, ValidationError
from .schema import REGISTRY, TABLES, get_rule
from .dump import RDBDump
from .convert import Dump2RDF
