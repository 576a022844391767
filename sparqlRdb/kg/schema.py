from __future__ import annotations

"""Registry of GA4GH graph tables and their row-to-triple rules.

Source schema: ``graphSQL_v023.sql`` from the GA4GH reference server. Each
:class:`TableRule` binds the column layout of one table to the pure function
that turns a dumped row into triples. Entity tables emit ``rdf:type`` and
``rdfs:label`` followed by one triple per remaining column in declared order;
join tables emit the relationship in both directions.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterator, List, Mapping, Sequence

from .emitter import Triple, ValidationError
from .terms import (
    ENTITY_KEYS,
    boolean_literal,
    date_literal,
    entity_uri,
    file_uri,
    integer_literal,
    label_literal,
    quote_literal,
    real_literal,
    taxonomy_uri,
)

ID = "id"
STRING = "string"
INTEGER = "integer"
REAL = "real"
BOOLEAN = "boolean"
DATE = "date"
TAXON = "taxon"
FILE = "file"


def ref(kind: str) -> str:
    """Field kind for a foreign key into ``kind``."""
    return f"ref:{kind}"


@dataclass(frozen=True)
class Field:
    name: str
    kind: str
    required: bool = False

    @property
    def target(self) -> str | None:
        if self.kind.startswith("ref:"):
            return self.kind[len("ref:") :]
        return None


@dataclass(frozen=True)
class TableRule:
    name: str
    fields: tuple[Field, ...]
    convert: Callable[[Sequence[str]], List[Triple]]
    join: bool = False

    def __call__(self, row: Sequence[str]) -> List[Triple]:
        return self.convert(row)


_LITERALS: dict[str, Callable[[str], str]] = {
    STRING: quote_literal,
    INTEGER: integer_literal,
    REAL: real_literal,
    BOOLEAN: boolean_literal,
    DATE: date_literal,
    TAXON: taxonomy_uri,
    FILE: file_uri,
}


def _object_term(field: Field, value: str) -> str:
    target = field.target
    if target is not None:
        return entity_uri(target, value)
    return _LITERALS[field.kind](value)


def _align(table: str, fields: Sequence[Field], row: Sequence[str]) -> list[str]:
    """Pad ``row`` to the table width and reject empty required columns."""

    values = [str(v) for v in row]
    if len(values) > len(fields):
        raise ValidationError(
            f"expected {len(fields)} fields, got {len(values)}", table=table
        )
    values.extend([""] * (len(fields) - len(values)))
    for field, value in zip(fields, values):
        if field.required and value == "":
            raise ValidationError(
                "required field is empty", table=table, field=field.name
            )
    return values


def entity_table(name: str, *fields: Field) -> TableRule:
    """Build the rule for a table whose rows are entities of kind ``name``."""

    keys = ENTITY_KEYS[name]
    key_positions = [next(i for i, f in enumerate(fields) if f.name == k) for k in keys]

    def convert(row: Sequence[str]) -> List[Triple]:
        values = _align(name, fields, row)
        ids = [values[i] for i in key_positions]
        subject = entity_uri(name, *ids)
        triples: List[Triple] = [
            (subject, "rdf:type", f":{name}"),
            (subject, "rdfs:label", label_literal(name, *ids)),
        ]
        for field, value in zip(fields, values):
            if field.kind == ID or value == "":
                continue
            triples.append((subject, f":{field.name}", _object_term(field, value)))
        return triples

    return TableRule(name=name, fields=tuple(fields), convert=convert)


def join_table(name: str, left: Field, right: Field) -> TableRule:
    """Build the rule for a many-to-many table linking two entity kinds."""

    fields = (left, right)

    def convert(row: Sequence[str]) -> List[Triple]:
        values = _align(name, fields, row)
        node0 = entity_uri(left.target, values[0])
        node1 = entity_uri(right.target, values[1])
        return [
            (node0, f":{right.name}", node1),
            (node1, f":{left.name}", node0),
        ]

    return TableRule(name=name, fields=fields, convert=convert, join=True)


_RULES = (
    entity_table(
        "Allele",
        Field("ID", ID, True),
        Field("variantSetID", ref("VariantSet"), True),
        Field("name", STRING),
    ),
    entity_table(
        "AlleleCall",
        Field("alleleID", ref("Allele"), True),
        Field("callSetID", ref("CallSet"), True),
        Field("ploidy", INTEGER, True),
    ),
    entity_table(
        "AllelePathItem",
        Field("alleleID", ref("Allele"), True),
        Field("pathItemIndex", INTEGER, True),
        Field("sequenceID", ref("Sequence"), True),
        Field("start", INTEGER, True),
        Field("length", INTEGER, True),
        Field("strandIsForward", BOOLEAN, True),
    ),
    entity_table(
        "CallSet",
        Field("ID", ID, True),
        Field("name", STRING),
        Field("sampleID", STRING),
    ),
    entity_table(
        "FASTA",
        Field("ID", ID, True),
        Field("fastaURI", FILE, True),
    ),
    entity_table(
        "GraphJoin",
        Field("ID", ID, True),
        Field("side1SequenceID", ref("Sequence"), True),
        Field("side1Position", INTEGER, True),
        Field("side1StrandIsForward", BOOLEAN, True),
        Field("side2SequenceID", ref("Sequence"), True),
        Field("side2Position", INTEGER, True),
        Field("side2StrandIsForward", BOOLEAN, True),
    ),
    join_table(
        "GraphJoin_ReferenceSet_Join",
        Field("graphJoinID", ref("GraphJoin"), True),
        Field("referenceSetID", ref("ReferenceSet"), True),
    ),
    join_table(
        "GraphJoin_VariantSet_Join",
        Field("graphJoinID", ref("GraphJoin"), True),
        Field("variantSetID", ref("VariantSet"), True),
    ),
    entity_table(
        "Reference",
        Field("ID", ID, True),
        Field("name", STRING, True),
        Field("updateTime", DATE, True),
        Field("sequenceID", ref("Sequence"), True),
        Field("start", INTEGER),
        Field("length", INTEGER),
        Field("md5checksum", STRING),
        Field("isDerived", BOOLEAN),
        Field("sourceDivergence", REAL),
        Field("ncbiTaxonID", TAXON),
        Field("isPrimary", BOOLEAN),
    ),
    entity_table(
        "ReferenceAccession",
        Field("ID", ID, True),
        Field("referenceID", ref("Reference"), True),
        Field("accessionID", STRING, True),
    ),
    entity_table(
        "ReferenceSet",
        Field("ID", ID, True),
        Field("ncbiTaxonID", TAXON),
        Field("description", STRING),
        Field("assemblyID", STRING),
        Field("isDerived", BOOLEAN, True),
    ),
    entity_table(
        "ReferenceSetAccession",
        Field("ID", ID, True),
        Field("referenceSetID", ref("ReferenceSet"), True),
        Field("accessionID", STRING, True),
    ),
    join_table(
        "Reference_ReferenceSet_Join",
        Field("referenceID", ref("Reference"), True),
        Field("referenceSetID", ref("ReferenceSet"), True),
    ),
    entity_table(
        "Sequence",
        Field("ID", ID, True),
        Field("fastaID", ref("FASTA"), True),
        Field("sequenceRecordName", STRING, True),
        Field("md5checksum", STRING, True),
        Field("length", INTEGER, True),
    ),
    entity_table(
        "VariantSet",
        Field("ID", ID, True),
        Field("referenceSetID", ref("ReferenceSet"), True),
        Field("name", STRING),
    ),
    join_table(
        "VariantSet_CallSet_Join",
        Field("variantSetID", ref("VariantSet"), True),
        Field("callSetID", ref("CallSet"), True),
    ),
)

REGISTRY: Mapping[str, TableRule] = MappingProxyType({r.name: r for r in _RULES})
TABLES: tuple[str, ...] = tuple(r.name for r in _RULES)


def get_rule(table: str) -> TableRule:
    return REGISTRY[table]


def iter_rules() -> Iterator[TableRule]:
    return iter(_RULES)


__all__ = [
    "Field",
    "TableRule",
    "ref",
    "entity_table",
    "join_table",
    "REGISTRY",
    "TABLES",
    "get_rule",
    "iter_rules",
]
