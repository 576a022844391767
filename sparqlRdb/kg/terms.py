from __future__ import annotations

"""RDF term builders for the GA4GH graph converter.

Every function here returns a term already serialised for the triple stream:
URIs in angle brackets, literals quoted and escaped, typed literals with an
explicit ``xsd`` datatype. Builders are pure; identical inputs always produce
identical terms so foreign keys resolve to the URI the referenced table mints
for its own primary key.
"""

import re
from urllib.parse import quote

from .emitter import ValidationError, validate
from .namespaces import GRAPH_NS, TAXON

# Entity kind -> names of the key columns its URI is minted from.
ENTITY_KEYS: dict[str, tuple[str, ...]] = {
    "Allele": ("ID",),
    "AlleleCall": ("alleleID", "callSetID"),
    "AllelePathItem": ("alleleID", "pathItemIndex"),
    "CallSet": ("ID",),
    "FASTA": ("ID",),
    "GraphJoin": ("ID",),
    "Reference": ("ID",),
    "ReferenceAccession": ("ID",),
    "ReferenceSet": ("ID",),
    "ReferenceSetAccession": ("ID",),
    "Sequence": ("ID",),
    "VariantSet": ("ID",),
}

_ESCAPES = (
    ("\\", "\\\\"),
    ("\t", "\\t"),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ('"', '\\"'),
)
_UNESCAPES = {"\\": "\\", "t": "\t", "n": "\n", "r": "\r", '"': '"'}
_UNESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

_INTEGER_RE = re.compile(r"\s*([-+]?\d+)")
_REAL_RE = re.compile(r"\s*([-+]?(?:\d+(?:\.\d+)?|\.\d+)(?:[eE][-+]?\d+)?)")
_TRUE_RE = re.compile(r"TRUE|1", re.IGNORECASE)


def _quote_segment(value: str) -> str:
    # RFC 3986 unreserved characters stay as they are; everything else,
    # "/" included, is percent-encoded.
    return quote(str(value), safe="-._~")


def entity_uri(kind: str, *ids: str) -> str:
    """Mint ``<GRAPH_NS/{kind}/{id}[/{id2}]>``; each id is percent-encoded."""

    keys = ENTITY_KEYS.get(kind)
    if keys is None:
        raise ValidationError(f"unknown entity kind {kind!r}")
    if len(ids) != len(keys):
        raise ValidationError(
            f"{kind} URI needs {len(keys)} id(s) ({', '.join(keys)}), got {len(ids)}"
        )
    validate(*ids)
    path = "/".join(_quote_segment(i) for i in ids)
    return f"<{GRAPH_NS}/{kind}/{path}>"


def taxonomy_uri(taxon_id: str) -> str:
    # identifiers.org namespace; callers only pass present values.
    return f"<{TAXON[_quote_segment(taxon_id)]}>"


def file_uri(path: str) -> str:
    validate(path)
    return f"<file://{quote(str(path), safe='/-._~')}>"


def quote_literal(value: str) -> str:
    """Escape ``value`` and wrap it in double quotes."""

    text = str(value)
    for raw, escaped in _ESCAPES:
        text = text.replace(raw, escaped)
    return f'"{text}"'


def unescape_literal(literal: str) -> str:
    """Invert :func:`quote_literal`."""

    body = literal
    if len(body) >= 2 and body[0] == body[-1] == '"':
        body = body[1:-1]
    return _UNESCAPE_RE.sub(lambda m: _UNESCAPES.get(m.group(1), m.group(0)), body)


def label_literal(kind: str, *ids: str) -> str:
    return quote_literal("/".join([kind, *ids]))


def parse_integer(value: str) -> int:
    """Loosely parse the leading integer of ``value``; no digits gives ``0``."""

    match = _INTEGER_RE.match(value or "")
    return int(match.group(1)) if match else 0


def parse_real(value: str) -> float:
    """Loosely parse the leading decimal number of ``value``; none gives ``0.0``."""

    match = _REAL_RE.match(value or "")
    return float(match.group(1)) if match else 0.0


def integer_literal(value: str) -> str:
    return f'"{parse_integer(value)}"^^xsd:integer'


def real_literal(value: str) -> str:
    return f'"{parse_real(value)!r}"^^xsd:double'


def boolean_literal(value: str) -> str:
    return "true" if _TRUE_RE.search(value or "") else "false"


def date_literal(value: str) -> str:
    # e.g. "2015-07-20"; the format is not checked.
    return f'"{value}"^^xsd:date'


__all__ = [
    "ENTITY_KEYS",
    "entity_uri",
    "taxonomy_uri",
    "file_uri",
    "quote_literal",
    "unescape_literal",
    "label_literal",
    "parse_integer",
    "parse_real",
    "integer_literal",
    "real_literal",
    "boolean_literal",
    "date_literal",
]
