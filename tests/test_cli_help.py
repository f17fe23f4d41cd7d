from __future__ import annotations

from typer.testing import CliRunner

from protokit.cli import app


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("digits", "string", "integer", "real", "binary", "parse", "exec"):
        assert command in result.output


def test_digits_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["digits", "--help"])
    assert "--type" in result.output
    assert "--seed" in result.output
    assert "--config" in result.output
