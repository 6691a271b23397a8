"""Tests for the metrics-lite command line."""

import json

import pytest
from typer.testing import CliRunner

from metrics_lite import __version__
from metrics_lite.cli import app

runner = CliRunner()


@pytest.fixture
def records_file(tmp_path, records_json):
    path = tmp_path / "metrics.json"
    path.write_text(json.dumps(records_json))
    return path


def _document(stdout: str) -> dict:
    return json.loads(stdout.strip().splitlines()[-1])


class TestReportCommand:
    def test_tables_and_document(self, records_file):
        result = runner.invoke(app, ["report", str(records_file)])
        assert result.exit_code == 0, result.output
        assert "File Metrics" in result.stdout
        assert "Path: lib/Big.pm" in result.stdout
        assert len(_document(result.stdout)["runs"][0]["results"]) == 2

    def test_only_json(self, records_file):
        result = runner.invoke(app, ["report", str(records_file), "--only-json"])
        assert result.exit_code == 0, result.output
        doc = json.loads(result.stdout)
        assert doc["version"] == "2.1.0"

    def test_show_only_errors(self, records_file):
        result = runner.invoke(
            app, ["report", str(records_file), "--show-only-errors", "--only-json"]
        )
        assert result.exit_code == 0, result.output
        results = json.loads(result.stdout)["runs"][0]["results"]
        assert [r["message"]["arguments"][1] for r in results] == ["monster"]

    def test_thresholds_from_flags(self, records_file):
        result = runner.invoke(
            app,
            [
                "report",
                str(records_file),
                "--show-only-errors",
                "--only-json",
                "--max-sub-lines",
                "5",
                "--max-sub-complexity",
                "1",
            ],
        )
        assert result.exit_code == 0, result.output
        results = json.loads(result.stdout)["runs"][0]["results"]
        assert len(results) == 2

    def test_thresholds_from_config_file(self, records_file, tmp_path):
        config = tmp_path / "custom.toml"
        config.write_text("[report]\nshow_only_errors = true\nonly_machine_output = true\n")
        result = runner.invoke(app, ["report", str(records_file), "--config", str(config)])
        assert result.exit_code == 0, result.output
        assert len(json.loads(result.stdout)["runs"][0]["results"]) == 1

    def test_flag_overrides_config_file(self, records_file, tmp_path):
        config = tmp_path / "custom.toml"
        config.write_text("[report]\nshow_only_errors = true\n")
        result = runner.invoke(
            app,
            ["report", str(records_file), "--config", str(config), "--show-all", "--only-json"],
        )
        assert result.exit_code == 0, result.output
        assert len(json.loads(result.stdout)["runs"][0]["results"]) == 2

    def test_malformed_records_exit_code(self, tmp_path):
        path = tmp_path / "metrics.json"
        path.write_text(json.dumps({"path": "lib/A.pm"}))
        result = runner.invoke(app, ["report", str(path)])
        assert result.exit_code == 1

    def test_missing_records_file(self, tmp_path):
        result = runner.invoke(app, ["report", str(tmp_path / "missing.json")])
        assert result.exit_code != 0

    def test_undecodable_records_file(self, tmp_path):
        path = tmp_path / "metrics.json"
        path.write_bytes(b'[{"path": "\xff\xfe", "lines": 1}]')
        result = runner.invoke(app, ["report", str(path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)

    def test_log_file(self, records_file, tmp_path):
        log_path = tmp_path / "run.log"
        result = runner.invoke(
            app, ["report", str(records_file), "--verbose", "--log-file", str(log_path)]
        )
        assert result.exit_code == 0, result.output
        assert "Reporting on 2 files" in log_path.read_text()


class TestSummaryCommand:
    def test_prints_statistics(self, records_file):
        result = runner.invoke(app, ["summary", str(records_file)])
        assert result.exit_code == 0, result.output
        assert "Subroutine Statistics" in result.stdout
        assert "Files:" in result.stdout
        assert "64.00" in result.stdout  # mean sub length of 8 and 120

    def test_empty_records(self, tmp_path):
        path = tmp_path / "metrics.json"
        path.write_text("[]")
        result = runner.invoke(app, ["summary", str(path)])
        assert result.exit_code == 0, result.output
        assert "Subroutine Statistics" in result.stdout

    def test_undecodable_records_file(self, tmp_path):
        path = tmp_path / "metrics.json"
        path.write_bytes(b"\xff\xfe[]")
        result = runner.invoke(app, ["summary", str(path)])
        assert result.exit_code == 1


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout
