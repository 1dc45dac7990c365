"""Tests for the eternity CLI.

Covers:
- humanize / robotize output per profile and input unit
- decompose table and remainder
- profiles listing, including configured profiles
- Error handling and exit codes
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from eternity.cli import app
from eternity.cli_utils import EXIT_CONFIG_ERROR, EXIT_ERROR, EXIT_SUCCESS

runner = CliRunner()


class TestHumanizeCommand:
    """Tests for `eternity humanize`."""

    def test_seconds_default_profile(self) -> None:
        result = runner.invoke(app, ["humanize", "3672"])
        assert result.exit_code == EXIT_SUCCESS
        assert result.output.strip() == "1h 1m 12s"

    def test_millis_short_profile(self) -> None:
        result = runner.invoke(app, ["humanize", "2134", "--unit", "ms", "--profile", "short"])
        assert result.exit_code == EXIT_SUCCESS
        assert result.output.strip() == "2s 134ms"

    def test_nanos_nano_profile(self) -> None:
        result = runner.invoke(app, ["humanize", "2134567789", "-u", "ns", "-p", "nano"])
        assert result.exit_code == EXIT_SUCCESS
        assert result.output.strip() == "134ms 567us 789ns"

    def test_underscore_separators(self) -> None:
        result = runner.invoke(app, ["humanize", "90_072"])
        assert result.output.strip() == "1d 1h 1m 12s"

    def test_zero(self) -> None:
        result = runner.invoke(app, ["humanize", "0", "-p", "medium"])
        assert result.output.strip() == "0s"


class TestRobotizeCommand:
    """Tests for `eternity robotize`."""

    def test_seconds(self) -> None:
        result = runner.invoke(app, ["robotize", "21"])
        assert result.exit_code == EXIT_SUCCESS
        assert result.output.strip() == "0d 0h 0m 21s 0ms"

    def test_short_profile(self) -> None:
        result = runner.invoke(app, ["robotize", "2134", "-u", "ms", "-p", "short"])
        assert result.output.strip() == "0m 2s 134ms"


class TestDecomposeCommand:
    """Tests for `eternity decompose`."""

    def test_table_and_remainder(self) -> None:
        result = runner.invoke(app, ["decompose", "2134567", "-u", "us"])
        assert result.exit_code == EXIT_SUCCESS
        assert "Profile: full" in result.output
        assert "134" in result.output
        assert "Remainder: 567000ns" in result.output


class TestProfilesCommand:
    """Tests for `eternity profiles`."""

    def test_lists_builtins(self) -> None:
        result = runner.invoke(app, ["profiles"])
        assert result.exit_code == EXIT_SUCCESS
        for name in ("full", "medium", "short", "nano", "precise"):
            assert name in result.output

    def test_lists_configured_profiles(self, write_config: Callable[..., Path]) -> None:
        path = write_config("profiles:\n  - name: hm\n    units: [h, m]\n")
        result = runner.invoke(app, ["profiles", "--config", str(path)])
        assert result.exit_code == EXIT_SUCCESS
        assert "hm" in result.output


class TestConfigOption:
    """Tests for --config handling."""

    def test_config_default_profile(self, write_config: Callable[..., Path]) -> None:
        path = write_config("default_profile: medium\n")
        result = runner.invoke(app, ["humanize", str(90_072), "-c", str(path)])
        assert result.exit_code == EXIT_SUCCESS
        assert result.output.strip() == "25h 1m 12s"

    def test_config_zero_token(self, write_config: Callable[..., Path]) -> None:
        path = write_config('zero_token: "none"\n')
        result = runner.invoke(app, ["humanize", "0", "-c", str(path)])
        assert result.output.strip() == "none"

    def test_invalid_config_exit_code(self, write_config: Callable[..., Path]) -> None:
        path = write_config("default_profile: hourly\n")
        result = runner.invoke(app, ["humanize", "21", "-c", str(path)])
        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "Invalid configuration" in result.output

    def test_missing_config_exit_code(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["robotize", "21", "-c", str(tmp_path / "nope.yaml")])
        assert result.exit_code == EXIT_CONFIG_ERROR


class TestErrors:
    """Tests for invalid arguments."""

    def test_unknown_profile(self) -> None:
        result = runner.invoke(app, ["humanize", "21", "-p", "fortnight"])
        assert result.exit_code == EXIT_ERROR
        assert "Unknown profile" in result.output

    @pytest.mark.parametrize("value", ["abc", "1.5", ""])
    def test_invalid_value(self, value: str) -> None:
        result = runner.invoke(app, ["humanize", value])
        assert result.exit_code == EXIT_ERROR
        assert "Invalid duration value" in result.output

    def test_invalid_unit(self) -> None:
        result = runner.invoke(app, ["robotize", "21", "-u", "h"])
        assert result.exit_code == EXIT_ERROR
        assert "Invalid unit" in result.output

    def test_no_args_shows_help(self) -> None:
        result = runner.invoke(app, [])
        assert "humanize" in result.output
