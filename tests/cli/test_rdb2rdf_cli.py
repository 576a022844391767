from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from click.testing import CliRunner

from sparqlRdb.cli.rdb2rdf import rdb2rdf
from sparqlRdb.kg import dump as dump_mod

BASE = "http://ga4gh.org/graph/rdf"


def test_convert_existing_dumps(graph_dump_dir: Path):
    result = CliRunner().invoke(rdb2rdf, ["graph.db", str(graph_dump_dir), "--skip-dump"])
    assert result.exit_code == 0, result.output
    assert "@prefix : <http://ga4gh.org/graph/rdf/ontology#> ." in result.output
    assert f"<{BASE}/VariantSet/4>\t:callSetID\t<{BASE}/CallSet/2> ." in result.output


def test_convert_dumps_then_converts(tmp_path: Path, graph_dump_dir: Path, monkeypatch):
    db = tmp_path / "graph.db"
    db.write_bytes(b"")
    calls: list[list[str]] = []

    def fake_run(cmd, shell=False, stdout=None, stderr=None, check=False):
        calls.append(cmd)
        table = cmd[-1].split()[-1].rstrip(";")
        stdout.write((graph_dump_dir / table).read_text(encoding="utf-8"))
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr(dump_mod.shutil, "which", lambda name: name)
    monkeypatch.setattr(dump_mod.subprocess, "run", fake_run)

    result = CliRunner().invoke(rdb2rdf, [str(db), "--sqlite3", "/opt/sqlite3"])
    assert result.exit_code == 0, result.output
    assert len(calls) == 16
    assert calls[0][0] == "/opt/sqlite3"
    assert (tmp_path / "graph" / "Allele").exists()
    assert f"<{BASE}/Allele/1>\trdf:type\t:Allele ." in result.output


def test_validation_error_is_reported_cleanly(tmp_path: Path, graph_dump_dir: Path):
    dump_dir = tmp_path / "dump"
    shutil.copytree(graph_dump_dir, dump_dir)
    (dump_dir / "Sequence").write_text("11|1|chr1||500\n", encoding="utf-8")
    result = CliRunner().invoke(rdb2rdf, ["graph.db", str(dump_dir), "--skip-dump"])
    assert result.exit_code == 1
    assert "Error: Sequence line 1 field md5checksum: required field is empty" in result.output


def test_missing_database_is_reported(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(dump_mod.shutil, "which", lambda name: name)
    result = CliRunner().invoke(rdb2rdf, [str(tmp_path / "nope.db")])
    assert result.exit_code == 1
    assert "Database file not found" in result.output


def test_missing_dump_file_is_reported(tmp_path: Path):
    result = CliRunner().invoke(rdb2rdf, ["graph.db", str(tmp_path), "--skip-dump"])
    assert result.exit_code == 1
    assert "Missing table dump" in result.output


def test_list_tables():
    result = CliRunner().invoke(rdb2rdf, ["--list-tables"])
    assert result.exit_code == 0
    assert "VariantSet_CallSet_Join" in result.output
    assert "ID*:id" in result.output
    assert "join" in result.output
