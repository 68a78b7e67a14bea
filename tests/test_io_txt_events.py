"""Tests for the plain-text event source."""

from __future__ import annotations

from pathlib import Path

import pytest

from pagewords.events import Characters, DocumentEnd, DocumentStart, ElementEnd, ElementStart
from pagewords.io.readers.txt_reader import read_text, read_text_events, split_pages


def test_read_text_handles_utf8_bom(tmp_path: Path) -> None:
    file_path = tmp_path / "bom.txt"
    with open(file_path, "w", encoding="utf-8-sig", newline="") as f:
        f.write("hello")
    assert read_text(file_path) == "hello"


@pytest.mark.parametrize(
    "text,pages",
    [
        ("one", ["one"]),
        ("one\ftwo", ["one", "two"]),
        ("one\ftwo\f", ["one", "two"]),
        ("one\f\f", ["one", ""]),
        ("", [""]),
    ],
)
def test_split_pages(text: str, pages: list[str]) -> None:
    assert split_pages(text) == pages


def test_events_per_page(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("a b\fc", encoding="utf-8")
    assert list(read_text_events(path, page_tag="page")) == [
        DocumentStart(),
        ElementStart("page"),
        Characters("a b\n"),
        ElementEnd("page"),
        ElementStart("page"),
        Characters("c\n"),
        ElementEnd("page"),
        DocumentEnd(),
    ]


def test_missing_file_raises_before_iteration(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_text_events(tmp_path / "missing.txt")
