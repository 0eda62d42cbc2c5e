"""
Tests for the command-line interface.
"""

import json

import pytest
from click.testing import CliRunner

from italian_holidays.cli import main


@pytest.fixture
def runner(monkeypatch):
    """Create a CliRunner with a clean configuration environment."""
    for env_var in (
        "ITALIAN_HOLIDAYS_LANGUAGE",
        "ITALIAN_HOLIDAYS_DATE_FORMAT",
        "ITALIAN_HOLIDAYS_OUTPUT_DIRECTORY",
        "ITALIAN_HOLIDAYS_OUTPUT_FORMAT",
    ):
        monkeypatch.delenv(env_var, raising=False)
    return CliRunner()


class TestCli:
    """Tests for the italian-holidays CLI."""

    def test_holidays(self, runner):
        result = runner.invoke(main, ["holidays", "--year", "2024"])

        assert result.exit_code == 0
        assert "Capodanno" in result.output
        assert "Santo Stefano" in result.output

    def test_holidays_export(self, runner, tmp_path, monkeypatch):
        monkeypatch.setenv("ITALIAN_HOLIDAYS_OUTPUT_FORMAT", "csv")
        output = tmp_path / "holidays.csv"
        result = runner.invoke(main, ["holidays", "-y", "2024", "-o", str(output)])

        assert result.exit_code == 0
        assert len(output.read_text(encoding="utf-8").splitlines()) == 13

    def test_easter(self, runner):
        result = runner.invoke(main, ["easter", "--year", "2024"])

        assert result.exit_code == 0
        assert "31/03/2024" in result.output
        assert "01/04/2024" in result.output

    def test_check_holiday(self, runner):
        result = runner.invoke(main, ["check", "25/04/2024"])

        assert result.exit_code == 0
        assert "Holiday" in result.output
        assert "Liberazione" in result.output

    def test_check_invalid_date(self, runner):
        result = runner.invoke(main, ["check", "not-a-date"])

        assert result.exit_code == 1
        assert "Invalid date format" in result.output

    def test_add(self, runner):
        result = runner.invoke(main, ["add", "2024-01-05", "1"])

        assert result.exit_code == 0
        assert "08/01/2024" in result.output

    def test_add_negative(self, runner):
        result = runner.invoke(main, ["add", "--", "2024-04-02", "-1"])

        assert result.exit_code == 0
        assert "29/03/2024" in result.output

    def test_subtract(self, runner):
        result = runner.invoke(main, ["subtract", "2024-01-08", "1"])

        assert result.exit_code == 0
        assert "05/01/2024" in result.output

    def test_count_json(self, runner, tmp_path):
        output = tmp_path / "count.json"
        result = runner.invoke(
            main,
            ["count", "2024-04-01", "2024-04-30", "--format", "json", "--output", str(output)],
        )

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["calculation"]["working_days"] == 20

    def test_count_inverted_range(self, runner):
        result = runner.invoke(main, ["count", "2024-05-01", "2024-04-01"])

        assert result.exit_code == 1
        assert "End date must be after start date" in result.output

    def test_english_names_from_env(self, runner, monkeypatch):
        monkeypatch.setenv("ITALIAN_HOLIDAYS_LANGUAGE", "en")
        result = runner.invoke(main, ["holidays", "--year", "2024"])

        assert result.exit_code == 0
        assert "Easter Monday" in result.output

    def test_holidays_export_default_json(self, runner, tmp_path):
        output = tmp_path / "holidays.json"
        result = runner.invoke(main, ["holidays", "-y", "2024", "-o", str(output)])

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert len(data) == 12

    def test_output_uses_configured_format(self, runner, tmp_path, monkeypatch):
        """A bare --output exports in output.format from the configuration."""
        monkeypatch.setenv("ITALIAN_HOLIDAYS_OUTPUT_FORMAT", "csv")
        output = tmp_path / "count.csv"
        result = runner.invoke(main, ["count", "2024-04-01", "2024-04-30", "-o", str(output)])

        assert result.exit_code == 0
        lines = output.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("Start Date,End Date")
        assert lines[1].endswith(",20")

    def test_output_default_format_is_json(self, runner, tmp_path):
        output = tmp_path / "shift.json"
        result = runner.invoke(main, ["add", "2024-01-05", "1", "-o", str(output)])

        assert result.exit_code == 0
        assert json.loads(output.read_text(encoding="utf-8"))["result_date"] == "2024-01-08"

    def test_explicit_format_overrides_config(self, runner, tmp_path, monkeypatch):
        monkeypatch.setenv("ITALIAN_HOLIDAYS_OUTPUT_FORMAT", "csv")
        output = tmp_path / "shift.json"
        result = runner.invoke(
            main, ["subtract", "2024-01-08", "1", "-f", "json", "-o", str(output)]
        )

        assert result.exit_code == 0
        assert json.loads(output.read_text(encoding="utf-8"))["result_date"] == "2024-01-05"

    def test_count_until_last_representable_date(self, runner):
        result = runner.invoke(main, ["count", "9999-12-27", "9999-12-31"])

        assert result.exit_code == 0
        assert "Working Days" in result.output
