"""Tests for the knitsphere command-line front end."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from knitsphere import __version__
from knitsphere.api.generate import generate_pattern
from knitsphere.cli import cli


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "knitsphere" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_inputs(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Enter a diameter" in result.output
    assert "Pattern" not in result.output


def test_cli_partial_inputs(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-d", "4", "-s", "2"])
    assert result.exit_code == 0
    assert "Enter a diameter" in result.output


def test_cli_pattern(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-d", "4", "-s", "2", "-r", "2"])
    assert result.exit_code == 0
    assert "Pattern" in result.output
    assert "  1. Row 1: Cast on 10 stitches" in result.output
    assert "  8. Row 8: k25" in result.output


def test_cli_matches_api(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-d", "6", "-s", "5", "-r", "7"])
    assert result.exit_code == 0
    for line in generate_pattern(6.0, 5.0, 7.0):
        assert line in result.output


def test_cli_units_label(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-d", "10", "-s", "2", "-r", "3", "-u", "cm"])
    assert result.exit_code == 0
    assert "Diameter: 10 cm" in result.output
    assert "Stitches/cm: 2" in result.output
    assert "Rows/cm: 3" in result.output


def test_cli_default_units(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-d", "4", "-s", "2", "-r", "2"])
    assert "Stitches/in: 2" in result.output


def test_cli_invalid_input(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-d", "0", "-s", "2", "-r", "2"])
    assert result.exit_code == 1
    assert "diameter must be a positive number" in result.output


def test_cli_degenerate_geometry(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-d", "0.01", "-s", "1", "-r", "1"])
    assert result.exit_code == 1
    assert "too small" in result.output


def test_cli_legacy_numbering(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-d", "4", "-s", "2", "-r", "2", "--legacy-numbering"])
    assert result.exit_code == 0
    assert "  4. Row 2: k18" in result.output


def test_cli_seed_is_deterministic(cli_runner: CliRunner) -> None:
    args = ["-d", "6", "-s", "5", "-r", "7", "--seed", "9"]
    assert cli_runner.invoke(cli, args).output == cli_runner.invoke(cli, args).output


def test_cli_config_file(cli_runner: CliRunner, tmp_path) -> None:
    config = tmp_path / "knitsphere.yaml"
    config.write_text("default_units: cm\nrow_numbering: legacy\n")
    result = cli_runner.invoke(cli, ["-d", "4", "-s", "2", "-r", "2", "-c", str(config)])
    assert result.exit_code == 0
    assert "Stitches/cm: 2" in result.output
    assert "  4. Row 2: k18" in result.output


def test_cli_bad_config_file(cli_runner: CliRunner, tmp_path) -> None:
    config = tmp_path / "knitsphere.yaml"
    config.write_text("colour: blue\n")
    result = cli_runner.invoke(cli, ["-d", "4", "-s", "2", "-r", "2", "-c", str(config)])
    assert result.exit_code == 2
    assert "unknown setting" in result.output
