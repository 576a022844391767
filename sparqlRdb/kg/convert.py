"""Convert dumped GA4GH graph tables into a tab-separated triple stream."""

from __future__ import annotations

from pathlib import Path
from typing import IO, Iterable, Iterator, List, Optional

from .emitter import Triple, TripleEmitter, ValidationError
from .namespaces import turtle_header
from .schema import TABLES, TableRule, get_rule
from sparqlRdb.utils.log_json import JsonLogger

DELIMITER = "|"


def split_row(line: str) -> List[str]:
    return line.rstrip("\r\n").split(DELIMITER)


def iter_rows(lines: Iterable[str]) -> Iterator[tuple[int, List[str]]]:
    """Yield ``(line_no, fields)`` for every non-blank line."""

    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        yield line_no, split_row(line)


def convert_lines(rule: TableRule, lines: Iterable[str]) -> Iterator[Triple]:
    """Yield the triples for each row of ``lines`` using ``rule``.

    A :class:`ValidationError` is annotated with the table and line number
    before it propagates.
    """

    for line_no, row in iter_rows(lines):
        try:
            triples = rule.convert(row)
        except ValidationError as exc:
            exc.table = exc.table or rule.name
            exc.line_no = line_no
            raise
        yield from triples


class Dump2RDF:
    """Stream every table dump in ``dump_dir`` through its rule to ``out``."""

    def __init__(
        self,
        dump_dir: Path,
        out: IO[str],
        *,
        logger: Optional[JsonLogger] = None,
    ) -> None:
        self.dir = Path(dump_dir)
        self.emitter = TripleEmitter(out)
        self.log = logger or JsonLogger("rdb2rdf")

    def convert_table(self, table: str) -> int:
        rule = get_rule(table)
        path = self.dir / table
        self.log.info("convert_table", table=table, status="start")
        with path.open("r", encoding="utf-8") as fh:
            count = self.emitter.emit_all(convert_lines(rule, fh))
        self.log.info("convert_table", table=table, status="done", triples=count)
        return count

    def run(self, tables: Iterable[str] = TABLES) -> dict[str, int]:
        """Write the prefix header, then each table in order."""

        self.emitter.write_header(turtle_header())
        return {table: self.convert_table(table) for table in tables}


__all__ = ["DELIMITER", "split_row", "iter_rows", "convert_lines", "Dump2RDF"]
