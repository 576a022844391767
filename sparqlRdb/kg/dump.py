from __future__ import annotations

"""Dump GA4GH graph SQLite tables to pipe-delimited flat files."""

from pathlib import Path
import shutil
import subprocess
from typing import Iterable, Optional

from sparqlRdb.kg.schema import TABLES
from sparqlRdb.utils.log_json import JsonLogger

# Fixed output format; overrides whatever ~/.sqliterc sets.
SQLITE3_OPTIONS = ("-batch", "-list", "-noheader", "-separator", "|")


def default_dump_dir(rdb_file: Path) -> Path:
    """``path/to/graph.db`` dumps into ``path/to/graph``."""

    rdb_file = Path(rdb_file)
    name = rdb_file.name
    if name.endswith(".db"):
        name = name[: -len(".db")]
    return rdb_file.parent / name


class RDBDump:
    """Run ``sqlite3`` once per known table, writing one file per table.

    Parameters
    ----------
    rdb_file: Path
        SQLite database produced by the GA4GH graph server.
    dump_dir: Path, optional
        Destination directory; defaults to :func:`default_dump_dir`.
    sqlite3: str, optional
        Name or path of the ``sqlite3`` executable.
    """

    def __init__(
        self,
        rdb_file: Path,
        dump_dir: Optional[Path] = None,
        *,
        sqlite3: str = "sqlite3",
        logger: Optional[JsonLogger] = None,
    ) -> None:
        self.file = Path(rdb_file)
        self.dir = Path(dump_dir) if dump_dir else default_dump_dir(self.file)
        self.sqlite3 = sqlite3
        self.log = logger or JsonLogger("rdb2rdf")

    def path_for(self, table: str) -> Path:
        return self.dir / table

    def _executable(self) -> str:
        found = shutil.which(self.sqlite3)
        if not found:
            raise RuntimeError(
                f"sqlite3 executable not found: {self.sqlite3}. "
                "Install the SQLite command line shell or pass --sqlite3."
            )
        return found

    def dump_table(self, table: str, executable: Optional[str] = None) -> Path:
        exe = executable or self._executable()
        out_path = self.path_for(table)
        cmd = [exe, *SQLITE3_OPTIONS, str(self.file), f"select * from {table};"]
        self.log.info("dump_table", table=table, path=str(out_path))
        with out_path.open("w", encoding="utf-8") as fh:
            try:
                subprocess.run(
                    cmd, shell=False, stdout=fh, stderr=subprocess.PIPE, check=True
                )
            except subprocess.CalledProcessError as exc:
                err = exc.stderr.decode(errors="replace").strip() if exc.stderr else ""
                msg = f"sqlite3 dump of {table} failed: {exc.returncode}"
                if err:
                    msg += f": {err}"
                raise RuntimeError(msg) from exc
        return out_path

    def create(self, tables: Iterable[str] = TABLES) -> list[Path]:
        """Dump ``tables`` in order and return the written paths."""

        if not self.file.exists():
            raise FileNotFoundError(f"Database file not found: {self.file}")
        self.dir.mkdir(parents=True, exist_ok=True)
        exe = self._executable()
        return [self.dump_table(table, exe) for table in tables]


__all__ = ["SQLITE3_OPTIONS", "RDBDump", "default_dump_dir"]
