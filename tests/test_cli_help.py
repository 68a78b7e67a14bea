from __future__ import annotations

import typer
from typer.testing import CliRunner

from pagewords.cli import app

WIDE_TERMINAL = {"COLUMNS": "200"}


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"], env=WIDE_TERMINAL)
    assert "pagewords run" in result.stdout
    assert "words" in result.stdout


def test_run_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--help"], env=WIDE_TERMINAL)
    assert "--in" in result.stdout
    assert "--out" in result.stdout
    assert "--config" in result.stdout
    assert "--remove-punctuation" in result.stdout
    assert "--keep-punctuation" in result.stdout


def test_words_options_declared() -> None:
    command = typer.main.get_command(app)
    words = command.commands["words"]  # type: ignore[attr-defined]
    opts = {opt for param in words.params for opt in param.opts + param.secondary_opts}
    assert {"--in", "--config", "--remove-punctuation", "--keep-punctuation"} <= opts
