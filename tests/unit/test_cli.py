"""Tests for CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from pratt.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every command where no pratt.toml exists."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


def test_convert(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["convert", "(a+b)*c", "a=b=c"])
    assert result.exit_code == 0
    assert "(a+b)*c -> ab+c*" in result.output
    assert "a=b=c -> abc==" in result.output


def test_convert_error_stops(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["convert", "a", "(a", "b"])
    assert result.exit_code == 1
    assert "a -> a" in result.output
    assert "expected ')', got end of input at position 2" in result.output
    assert "b -> b" not in result.output


def test_convert_capacity_option(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["convert", "--capacity", "3", "a+b"])
    assert result.exit_code == 1
    assert "output overflow" in result.output


def test_convert_uses_manifest_capacity(cli_runner: CliRunner, write_manifest):
    path = write_manifest("[parser]\ncapacity = 2\n")
    result = cli_runner.invoke(app, ["convert", "--manifest", str(path), "a+b"])
    assert result.exit_code == 1
    assert "capacity of 2" in result.output


def test_check_reference_cases(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["check"])
    assert result.exit_code == 0
    assert "SUCCESS!!" in result.output


def test_check_manifest_cases(cli_runner: CliRunner, manifest_path: Path):
    result = cli_runner.invoke(app, ["check", "--manifest", str(manifest_path)])
    assert result.exit_code == 0
    assert "SUCCESS!!" in result.output


def test_check_reports_failures(cli_runner: CliRunner, write_manifest):
    path = write_manifest('[[cases]]\ninput = "a+b"\nexpected = "a+b"\n')
    result = cli_runner.invoke(app, ["check", "-m", str(path)])
    assert result.exit_code == 1
    assert "FAILURE: parse(a+b) = ab+, expected: a+b" in result.output
    assert "FAILURE!!" in result.output


def test_check_picks_up_local_manifest(cli_runner: CliRunner, isolated_cwd: Path):
    (isolated_cwd / "pratt.toml").write_text('[[cases]]\ninput = "a"\nexpected = "b"\n')
    result = cli_runner.invoke(app, ["check"])
    assert result.exit_code == 1

    result = cli_runner.invoke(app, ["check", "--reference"])
    assert result.exit_code == 0


def test_missing_manifest(cli_runner: CliRunner, tmp_path: Path):
    result = cli_runner.invoke(app, ["check", "--manifest", str(tmp_path / "nope.toml")])
    assert result.exit_code == 1
    assert "Manifest not found" in result.output


def test_invalid_manifest(cli_runner: CliRunner, write_manifest):
    path = write_manifest("[parser]\ncapacity = 0\n")
    result = cli_runner.invoke(app, ["check", "--manifest", str(path)])
    assert result.exit_code == 1
    assert "Invalid manifest" in result.output


def test_operators(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["operators"])
    assert result.exit_code == 0
    assert "right" in result.output
    assert "prefix" in result.output


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.startswith("pratt ")


def test_malformed_manifest_shape(cli_runner: CliRunner, write_manifest):
    path = write_manifest('parser = "x"\n')
    result = cli_runner.invoke(app, ["check", "--manifest", str(path)])
    assert result.exit_code == 1
    assert "Invalid manifest" in result.output


def test_convert_long_prefix_run(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["convert", "~" * 1000 + "a"])
    assert result.exit_code == 0
    assert "a" + "~" * 1000 in result.output


def test_get_version_reads_project_version():
    from pratt._version import get_version

    assert get_version() == "0.1.0"
