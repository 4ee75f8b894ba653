"""Tests for the bundle-info command line interface."""

import json
import tomllib
from pathlib import Path

from click.testing import CliRunner

from bundle_info import __version__
from bundle_info.cli import cli


def test_check_valid_bundle(cli_runner: CliRunner, example_bundle: Path) -> None:
    result = cli_runner.invoke(cli, ["check", str(example_bundle)])

    assert result.exit_code == 0
    assert f"OK: {example_bundle} (Student Robotics 2022.1.4.0)" in result.output


def test_check_missing_file_exits_with_error(cli_runner: CliRunner, tmp_path: Path) -> None:
    result = cli_runner.invoke(cli, ["check", str(tmp_path / "missing.toml")])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "missing.toml" in result.output


def test_check_malformed_toml_exits_with_error(cli_runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "bundle.toml"
    path.write_text("[bundle\n", encoding="utf-8")

    result = cli_runner.invoke(cli, ["check", str(path)])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_check_reports_each_violation(
    cli_runner: CliRunner, example_bundle: Path, tmp_path: Path
) -> None:
    text = example_bundle.read_text(encoding="utf-8")
    text = text.replace("enabled = true", 'enabled = "true"').replace(
        'region = "GB"', 'region = "GB"\nchannel = 6'
    )
    path = tmp_path / "bundle.toml"
    path.write_text(text, encoding="utf-8")

    result = cli_runner.invoke(cli, ["check", str(path)])

    assert result.exit_code == 1
    assert "Error: Invalid bundle document" in result.output
    assert "  wifi.enabled:" in result.output
    assert "  wifi.channel:" in result.output


def test_show_prints_canonical_toml(cli_runner: CliRunner, example_bundle: Path) -> None:
    result = cli_runner.invoke(cli, ["show", str(example_bundle)])

    assert result.exit_code == 0
    assert tomllib.loads(result.output) == tomllib.loads(example_bundle.read_text(encoding="utf-8"))


def test_show_json(cli_runner: CliRunner, example_bundle: Path) -> None:
    result = cli_runner.invoke(cli, ["show", str(example_bundle), "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["kit"] == {"name": "Student Robotics", "version": "2022.1.4.0"}
    assert data["wifi"]["enabled"] is True


def test_parse_version_text(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["parse-version", "2021.0.0.1dev:123456@master"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "epoch: 2021",
        "major: 0",
        "minor: 0",
        "patch: 1",
        "dev: true",
        "commit: 123456",
        "branch: master",
    ]


def test_parse_version_json(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["parse-version", "2022.1.4.0", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "epoch": 2022,
        "major": 1,
        "minor": 4,
        "patch": 0,
        "dev": False,
        "commit": None,
        "branch": None,
    }


def test_parse_version_invalid(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["parse-version", "2021.0.0"])

    assert result.exit_code == 1
    assert "Error: version was not in valid format." in result.output


def test_parse_version_overflow(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["parse-version", "99999.0.0.1"])

    assert result.exit_code == 1
    assert "Error: Unable to parse version epoch" in result.output


def test_version_option(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_no_command_shows_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])

    assert result.exit_code == 0
    assert "check" in result.output
    assert "parse-version" in result.output
