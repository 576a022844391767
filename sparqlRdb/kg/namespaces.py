from __future__ import annotations

"""Canonical namespaces for the GA4GH graph RDF output and the SPARQL client.

This module is the single source of truth for namespace strings used by the
converter's prefix header and by the client's default ``PREFIX`` block.
"""

from rdflib import Namespace
from rdflib.namespace import RDF, RDFS, XSD

# Base for every minted entity URI.
GRAPH_NS = "http://ga4gh.org/graph/rdf"
ONTOLOGY_NS = f"{GRAPH_NS}/ontology#"
TAXONOMY_NS = "http://identifiers.org/taxonomy/"

# rdflib Namespace helpers.
GA4GH = Namespace(ONTOLOGY_NS)
TAXON = Namespace(TAXONOMY_NS)

# Prefixes written ahead of the converter's triple stream, in output order.
HEADER_PREFIXES: list[tuple[str, str]] = [
    ("", ONTOLOGY_NS),
    ("rdf", str(RDF)),
    ("rdfs", str(RDFS)),
    ("xsd", str(XSD)),
]

# Prefixes the ``q``/``f``/``prefix`` commands prepend to queries.
DEFAULT_PREFIXES: dict[str, str] = {
    "rdf": str(RDF),
    "rdfs": str(RDFS),
    "owl": "http://www.w3.org/2002/07/owl#",
    "xsd": str(XSD),
    "pext": "http://proton.semanticweb.org/protonext#",
    "psys": "http://proton.semanticweb.org/protonsys#",
    "xhtml": "http://www.w3.org/1999/xhtml#",
    "dc": "http://purl.org/dc/elements/1.1/",
    "dcterms": "http://purl.org/dc/terms/",
    "foaf": "http://xmlns.com/foaf/0.1/",
    "skos": "http://www.w3.org/2004/02/skos/core#",
    "void": "http://rdfs.org/ns/void#",
    "dbpedia": "http://dbpedia.org/resource/",
    "dbp": "http://dbpedia.org/property/",
    "dbo": "http://dbpedia.org/ontology/",
    "yago": "http://dbpedia.org/class/yago/",
    "fb": "http://rdf.freebase.com/ns/",
    "sioc": "http://rdfs.org/sioc/ns#",
    "geo": "http://www.w3.org/2003/01/geo/wgs84_pos#",
    "geonames": "http://www.geonames.org/ontology#",
    "bibo": "http://purl.org/ontology/bibo/",
    "prism": "http://prismstandard.org/namespaces/basic/2.1/",
}


def turtle_header() -> list[str]:
    """Return the ``@prefix`` block that precedes converter output.

    The final empty string yields the blank separator line.
    """

    lines = [f"@prefix {name}: <{uri}> ." for name, uri in HEADER_PREFIXES]
    lines.append("")
    return lines


__all__ = [
    "GRAPH_NS",
    "ONTOLOGY_NS",
    "TAXONOMY_NS",
    "GA4GH",
    "TAXON",
    "HEADER_PREFIXES",
    "DEFAULT_PREFIXES",
    "turtle_header",
]
