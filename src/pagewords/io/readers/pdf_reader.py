"""PDF event source backed by ``pdfplumber``.

Each PDF page becomes one page element.  The page text returned by
``pdfplumber`` is emitted one line at a time, every line terminated by a
newline so that its last word is closed by whitespace.  Layout, fonts and OCR
are left to ``pdfplumber``; scanned pages simply produce empty pages.

Errors raised while opening or decoding the PDF are wrapped in
:class:`~pagewords.utils.errors.ExtractionError`.  A missing file raises
``FileNotFoundError`` before ``pdfplumber`` is consulted.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pdfplumber

from ...constants import PAGE_TAG
from ...events import TextEvent, page_events
from ...utils.errors import ExtractionError
from ...utils.logging import get_logger

logger = get_logger(__name__)


def extract_page_texts(path: str | os.PathLike[str]) -> list[str]:
    """Return the extracted text of every page of the PDF at ``path``."""

    pdf_path = Path(path)
    if not pdf_path.is_file():
        raise FileNotFoundError(f"No such file: '{pdf_path}'")
    try:
        with pdfplumber.open(str(pdf_path)) as pdf:
            texts = [page.extract_text() or "" for page in pdf.pages]
    except Exception as exc:  # pdfminer raises a wide range of parser errors
        raise ExtractionError(f"Failed to parse PDF '{pdf_path.name}': {exc}") from exc
    logger.debug("extracted %d pages from %s", len(texts), pdf_path.name)
    return texts


def read_pdf_events(
    path: str | os.PathLike[str], *, page_tag: str = PAGE_TAG, **_: object
) -> Iterator[TextEvent]:
    """Yield the event stream for the PDF at ``path``."""

    pages = [[line + "\n" for line in text.splitlines()] for text in extract_page_texts(path)]
    return iter(list(page_events(pages, page_tag)))


__all__ = ["extract_page_texts", "read_pdf_events"]
