from __future__ import annotations

"""Serialise triples as tab-separated lines terminated by `` .``."""

from typing import IO, Iterable, Optional, Tuple

Triple = Tuple[str, str, str]


class ValidationError(ValueError):
    """Raised when a required value is empty while building or emitting a triple."""

    def __init__(
        self,
        message: str,
        *,
        table: Optional[str] = None,
        line_no: Optional[int] = None,
        field: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.table = table
        self.line_no = line_no
        self.field = field

    def __str__(self) -> str:
        where = []
        if self.table:
            where.append(self.table)
        if self.line_no is not None:
            where.append(f"line {self.line_no}")
        if self.field:
            where.append(f"field {self.field}")
        message = super().__str__()
        return f"{' '.join(where)}: {message}" if where else message


def validate(*values: object) -> None:
    for value in values:
        if value is None or str(value) == "":
            raise ValidationError("empty value")


def format_triple(s: str, p: str, o: str) -> str:
    validate(s, p, o)
    return f"{s}\t{p}\t{o} ."


class TripleEmitter:
    """Write triples to ``stream``, one per line."""

    def __init__(self, stream: IO[str]) -> None:
        self.stream = stream
        self.count = 0

    def write_header(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.stream.write(line + "\n")

    def emit(self, triple: Triple) -> None:
        line = format_triple(*triple)
        self.stream.write(line + "\n")
        self.count += 1

    def emit_all(self, triples: Iterable[Triple]) -> int:
        emitted = 0
        for triple in triples:
            self.emit(triple)
            emitted += 1
        return emitted


__all__ = ["Triple", "ValidationError", "validate", "format_triple", "TripleEmitter"]
