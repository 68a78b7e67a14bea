from __future__ import annotations

from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from pagewords.cli import app
from pagewords.io.readers import pdf_reader
from pagewords.utils.errors import ExtractionError


def test_missing_input(tmp_path: Path) -> None:
    missing = tmp_path / "missing.pdf"
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--in", str(missing), "--out", str(tmp_path / "out")])
    assert result.exit_code == 3
    assert str(missing) in result.stderr


def test_unsupported_extension(tmp_path: Path) -> None:
    in_path = tmp_path / "foo.bin"
    in_path.write_text("data", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--in", str(in_path), "--out", str(tmp_path / "out")])
    assert result.exit_code == 3


def test_bad_config(tmp_path: Path) -> None:
    in_path = tmp_path / "in.txt"
    in_path.write_text("hello\n", encoding="utf-8")
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "run",
            "--in",
            str(in_path),
            "--out",
            str(tmp_path / "out"),
            "--config",
            str(bad_cfg),
        ],
    )
    assert result.exit_code == 4


def test_extraction_failure(tmp_path: Path, monkeypatch: Any) -> None:
    in_path = tmp_path / "broken.pdf"
    in_path.write_bytes(b"%PDF-broken")

    def boom(path: object) -> list[str]:
        raise ExtractionError("cannot parse broken.pdf")

    monkeypatch.setattr(pdf_reader, "extract_page_texts", boom)
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--in", str(in_path), "--out", str(tmp_path / "out")])
    assert result.exit_code == 5
    assert "broken.pdf" in result.stderr


def test_words_missing_input(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["words", "--in", str(tmp_path / "missing.txt")])
    assert result.exit_code == 3


def test_repeated_invocations_keep_exit_codes(tmp_path: Path) -> None:
    in_path = tmp_path / "in.txt"
    in_path.write_text("alpha beta\n", encoding="utf-8")
    runner = CliRunner()
    missing = runner.invoke(app, ["run", "--in", str(tmp_path / "nope.txt"), "--out", str(tmp_path)])
    assert missing.exit_code == 3
    ok = runner.invoke(app, ["run", "--in", str(in_path), "--out", str(tmp_path / "out")])
    assert ok.exit_code == 0, ok.output
    again = runner.invoke(app, ["words", "--in", str(in_path)])
    assert again.exit_code == 0
    assert '"alpha"' in again.stdout
