"""
Tests for the archhint CLI.
"""

import json

import pytest
from click.testing import CliRunner

from archhint.cli.commands import main

DOCUMENT = (
    "Company: Acme\n"
    "Nodes:\n"
    "  - Api:\n"
    "  - Db:\n"
    "Relationships:\n"
    "  - ApiToDb:\n"
    "      Start:\n"
)


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.delenv("ARCHHINT_SCHEMA_PATH", raising=False)
    monkeypatch.delenv("ARCHHINT_LOGGING", raising=False)
    return CliRunner()


@pytest.fixture
def document(tmp_path):
    path = tmp_path / "architecture.yaml"
    path.write_text(DOCUMENT, encoding="utf-8")
    return path


class TestComplete:
    def test_json_output(self, runner, document):
        result = runner.invoke(main, ["complete", str(document), "--line", "6", "--json"])
        assert result.exit_code == 0, result.output
        items = json.loads(result.stdout)
        assert [item["label"] for item in items] == ["Api", "Db"]

    def test_newline_flag(self, runner, tmp_path):
        path = tmp_path / "doc.yaml"
        path.write_text("Domain:\n  Name: foo\n    ", encoding="utf-8")
        result = runner.invoke(main, ["complete", str(path), "--line", "2", "--newline", "--json"])
        assert result.exit_code == 0, result.output
        assert [item["label"] for item in json.loads(result.stdout)] == ["Description", "Owner", "Criticality"]

    def test_table_output(self, runner, document):
        result = runner.invoke(main, ["complete", str(document), "--line", "7", "--character", "0"])
        assert result.exit_code == 0, result.output
        assert "Domain" in result.output

    def test_missing_schema_prints_nothing(self, runner, document, tmp_path):
        result = runner.invoke(main, [
            "complete", str(document), "--line", "6", "--json",
            "--schema", str(tmp_path / "missing.yaml"),
        ])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == []


class TestSchemaCommand:
    def test_prints_tree(self, runner):
        result = runner.invoke(main, ["schema"])
        assert result.exit_code == 0, result.output
        assert "Relationships" in result.output
        assert "array-of-object" in result.output

    def test_workspace_schema(self, runner, tmp_path):
        (tmp_path / "metadata.yaml").write_text(
            "spec:\n  properties:\n    Landscape:\n      type: string\n", encoding="utf-8"
        )
        result = runner.invoke(main, ["schema", "--workspace", str(tmp_path)])
        assert result.exit_code == 0, result.output
        assert "Landscape" in result.output

    def test_load_failure(self, runner, tmp_path):
        result = runner.invoke(main, ["schema", "--schema", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestMisc:
    def test_acknowledgement(self, runner):
        result = runner.invoke(main, ["architecture-as-code"])
        assert result.exit_code == 0
        assert "Architecture as code smart-hint support!" in result.output

    def test_serve(self, runner):
        result = runner.invoke(main, ["serve"], input='{"jsonrpc": "2.0", "method": "ping", "id": 1}\n')
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout.strip()) == {"jsonrpc": "2.0", "result": {"status": "ok"}, "id": 1}

    def test_version(self, runner):
        result = runner.invoke(main, ["version"])
        assert "archhint" in result.output

    def test_undecodable_schema(self, runner, tmp_path):
        path = tmp_path / "metadata.yaml"
        path.write_bytes(b"\xff\xfe")
        result = runner.invoke(main, ["schema", "--schema", str(path)])
        assert result.exit_code == 1
        assert "UTF-8" in result.output
