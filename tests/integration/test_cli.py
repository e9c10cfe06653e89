"""
Integration tests for the validate CLI.
"""

import json
from pathlib import Path

import pytest

from feed_validator.cli.validate_cli import (
    EXIT_BAD_INPUT,
    EXIT_FEED_INVALID,
    EXIT_OK,
    main,
)

pytestmark = pytest.mark.integration

SHIPPED_CONFIG = Path(__file__).resolve().parents[2] / "config" / "validation_rules.yaml"


class TestValidateCommand:
    """Tests for the validate command"""

    def test_invalid_feed_writes_report(self, feed_dir, tmp_path):
        output = tmp_path / "out" / "report.json"

        exit_code = main([
            "validate",
            "--input", str(feed_dir),
            "--validation-rules", str(SHIPPED_CONFIG),
            "--output", str(output),
        ])

        assert exit_code == EXIT_FEED_INVALID
        report = json.loads(output.read_text(encoding="utf-8"))
        assert report["passed"] is False
        assert report["counts_by_code"] == {"E_021": 1, "E_031": 1, "E_053": 1, "W_014": 1}

    def test_clean_feed_prints_report(self, clean_feed_dir, capsys):
        exit_code = main([
            "validate",
            "--input", str(clean_feed_dir),
            "--validation-rules", str(SHIPPED_CONFIG),
        ])

        assert exit_code == EXIT_OK
        report = json.loads(capsys.readouterr().out)
        assert report["passed"] is True
        assert report["entity_counts"]["stop_times.txt"] == 2

    def test_workers_option(self, feed_dir, tmp_path):
        output = tmp_path / "report.json"

        exit_code = main([
            "validate", "--input", str(feed_dir), "--workers", "4", "--output", str(output),
        ])

        assert exit_code == EXIT_FEED_INVALID
        assert json.loads(output.read_text(encoding="utf-8"))["error_count"] == 3

    def test_metrics_file(self, feed_dir, tmp_path):
        metrics_path = tmp_path / "metrics" / "feed.prom"

        main([
            "validate", "--input", str(feed_dir),
            "--output", str(tmp_path / "report.json"),
            "--metrics-file", str(metrics_path),
        ])

        text = metrics_path.read_text(encoding="utf-8")
        assert "feed_validator_notices_emitted_total" in text
        assert 'code="E_053"' in text

    def test_missing_input_directory(self, tmp_path):
        exit_code = main(["validate", "--input", str(tmp_path / "missing")])
        assert exit_code == EXIT_BAD_INPUT

    def test_undecodable_feed_file(self, clean_feed_dir):
        (clean_feed_dir / "trips.txt").write_bytes(b"route_id,service_id,trip_id\nr1,wk,t\xff1\n")

        exit_code = main(["validate", "--input", str(clean_feed_dir)])
        assert exit_code == EXIT_BAD_INPUT

    def test_invalid_rule_configuration(self, feed_dir, tmp_path):
        config_path = tmp_path / "rules.yaml"
        config_path.write_text("rules:\n  no_such_rule:\n    enabled: true\n", encoding="utf-8")

        exit_code = main([
            "validate", "--input", str(feed_dir), "--validation-rules", str(config_path),
        ])
        assert exit_code == EXIT_BAD_INPUT

    def test_invalid_worker_count(self, feed_dir):
        with pytest.raises(SystemExit) as exc_info:
            main(["validate", "--input", str(feed_dir), "--workers", "0"])
        assert exc_info.value.code == 2


class TestListNoticesCommand:
    """Tests for the list-notices command"""

    def test_lists_catalog(self, capsys):
        exit_code = main(["list-notices"])

        assert exit_code == EXIT_OK
        catalog = json.loads(capsys.readouterr().out)
        codes = [entry["code"] for entry in catalog]
        assert codes == sorted(codes)
        assert {"E_015", "E_021", "E_053", "W_014"} <= set(codes)
        assert {entry["severity"] for entry in catalog} == {"ERROR", "WARNING"}


def test_no_command_prints_help(capsys):
    assert main([]) == EXIT_BAD_INPUT
    assert "validate" in capsys.readouterr().out
