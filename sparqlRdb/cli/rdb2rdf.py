from __future__ import annotations

"""``rdb2rdf`` command line: convert a GA4GH graph SQLite database into RDF."""

import sys
from pathlib import Path
from typing import Optional

import click
from tabulate import tabulate

from sparqlRdb import __version__
from sparqlRdb.config import load_config
from sparqlRdb.kg.convert import Dump2RDF
from sparqlRdb.kg.dump import RDBDump, default_dump_dir
from sparqlRdb.kg.emitter import ValidationError
from sparqlRdb.kg.schema import iter_rules
from sparqlRdb.utils import configure_logging
from sparqlRdb.utils.log_json import JsonLogger


def table_listing() -> str:
    rows = []
    for rule in iter_rules():
        layout = ", ".join(
            f"{f.name}{'*' if f.required else ''}:{f.kind}" for f in rule.fields
        )
        rows.append((rule.name, "join" if rule.join else "entity", layout))
    return tabulate(rows, headers=["Table", "Kind", "Fields (* required)"])


def _list_tables(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(table_listing())
    ctx.exit()


@click.command()
@click.version_option(__version__)
@click.argument("database", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("dump_dir", required=False, type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "--sqlite3",
    "sqlite3",
    default=None,
    help="sqlite3 executable (default: $RDB2RDF_SQLITE3 or sqlite3).",
)
@click.option(
    "--skip-dump",
    is_flag=True,
    default=False,
    help="Reuse existing table dumps in DUMP_DIR instead of running sqlite3.",
)
@click.option(
    "--list-tables",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_list_tables,
    help="List the known tables and their column layout, then exit.",
)
@click.option("--debug", is_flag=True, default=False, help="Enable DEBUG level logging.")
def rdb2rdf(
    database: Path,
    dump_dir: Optional[Path],
    sqlite3: Optional[str],
    skip_dump: bool,
    debug: bool,
) -> None:
    """Dump every table of DATABASE and print its triples to stdout.

    Table dumps are written to DUMP_DIR, by default the database path
    without its ``.db`` suffix.
    """
    configure_logging(debug)
    log = JsonLogger("rdb2rdf")
    target = dump_dir or default_dump_dir(database)
    if not skip_dump:
        dump = RDBDump(database, target, sqlite3=sqlite3 or load_config().sqlite3, logger=log)
        try:
            dump.create()
        except (FileNotFoundError, RuntimeError) as exc:
            raise click.ClickException(str(exc))
    try:
        Dump2RDF(target, sys.stdout, logger=log).run()
    except ValidationError as exc:
        log.error("convert_failed", table=exc.table, line=exc.line_no, field=exc.field)
        raise click.ClickException(str(exc))
    except FileNotFoundError as exc:
        raise click.ClickException(f"Missing table dump: {exc.filename}")


def main() -> None:  # pragma: no cover - CLI entrypoint
    rdb2rdf()


if __name__ == "__main__":  # pragma: no cover
    main()
