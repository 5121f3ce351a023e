"""
Tests for the command line interface.
"""

import json

import pytest
from click.testing import CliRunner

from nth_workday.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    """Settings file with a results directory inside tmp_path."""
    path = tmp_path / "settings.yaml"
    path.write_text(
        f"output:\n  directory: {tmp_path / 'results'}\n",
        encoding="utf-8",
    )
    return str(path)


class TestLocateCommand:
    """Tests for `nth-workday locate`."""

    def test_default_week(self, runner, config_file):
        result = runner.invoke(main, ["locate", "10", "1", "2020", "-c", config_file])

        assert result.exit_code == 0
        assert "2020-01-14" in result.output
        assert "Tuesday" in result.output

    def test_weekdays_and_exclusions(self, runner, config_file):
        result = runner.invoke(
            main, ["locate", "10", "1", "2020", "-w", "mon-thu", "-c", config_file]
        )
        assert result.exit_code == 0
        assert "2020-01-16" in result.output

        result = runner.invoke(
            main, ["locate", "10", "1", "2020", "-x", "1", "-c", config_file]
        )
        assert result.exit_code == 0
        assert "2020-01-15" in result.output

    def test_repeated_weekday_option(self, runner, config_file):
        result = runner.invoke(
            main,
            ["locate", "1", "2", "2020", "-w", "sat", "-w", "sun", "-c", config_file],
        )

        assert result.exit_code == 0
        assert "2020-02-01" in result.output

    def test_not_found(self, runner, config_file):
        result = runner.invoke(main, ["locate", "31", "2", "2021", "-c", config_file])

        assert result.exit_code == 1
        assert "There isn't a 31st working day" in result.output

    def test_not_found_message_is_one_line(self, runner, config_file):
        result = runner.invoke(
            main, ["locate", "31", "2", "2021", "-x", "1,2", "-c", config_file]
        )

        assert result.exit_code == 1
        assert (
            "Error: There isn't a 31st working day "
            "(Monday, Tuesday, Wednesday, Thursday, Friday) in February 2021, "
            "excluding day(s) of month: 1, 2.\n"
        ) in result.output

    def test_error_text_is_not_markup(self, runner, config_file):
        result = runner.invoke(
            main, ["locate", "1", "1", "2020", "-w", "[/x]", "-c", config_file]
        )

        assert result.exit_code == 2
        assert "invalid weekday: '[/x]'" in result.output

    def test_out_of_range(self, runner, config_file):
        result = runner.invoke(main, ["locate", "1", "13", "2020", "-c", config_file])

        assert result.exit_code == 2
        assert "month out of range" in result.output

    def test_invalid_weekday(self, runner, config_file):
        result = runner.invoke(
            main, ["locate", "1", "1", "2020", "-w", "funday", "-c", config_file]
        )

        assert result.exit_code == 2
        assert "invalid weekday" in result.output

    def test_json_export(self, runner, config_file, tmp_path):
        output = tmp_path / "result.json"
        result = runner.invoke(
            main,
            ["locate", "10", "1", "2020", "-f", "json", "-o", str(output), "-c", config_file],
        )

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["result"]["date"] == "2020-01-14"
        assert data["query"]["excluded_days"] is None


class TestMonthCommand:
    """Tests for `nth-workday month`."""

    def test_lists_working_days(self, runner, config_file):
        result = runner.invoke(main, ["month", "2", "2020", "-c", config_file])

        assert result.exit_code == 0
        assert "2020-02-03" in result.output
        assert "2020-02-28" in result.output
        assert "2020-02-29" not in result.output

    def test_empty_week(self, runner, config_file):
        result = runner.invoke(main, ["month", "2", "2020", "-w", "", "-c", config_file])

        assert result.exit_code == 0
        assert "No working days" in result.output


class TestWeekdaysCommand:
    """Tests for `nth-workday weekdays`."""

    def test_lists_all_weekdays(self, runner):
        result = runner.invoke(main, ["weekdays"])

        assert result.exit_code == 0
        for name in ("Sunday", "Monday", "Saturday"):
            assert name in result.output


def test_version(runner):
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert "0.1.0" in result.output


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
