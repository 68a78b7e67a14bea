"""Plain-text event source.

:func:`read_text` loads text files without performing any content
normalization; UTF-8 byte-order marks are consumed by the ``"utf-8-sig"``
codec.  :func:`read_text_events` turns such a file into a page event stream
where a form feed (``\f``) separates pages, the convention used by
``pdftotext`` and similar converters.  A single trailing form feed does not
open an extra page.

``FileNotFoundError`` and other I/O errors propagate to the caller.
"""

from __future__ import annotations

import os
from collections.abc import Iterator

from ...constants import PAGE_TAG
from ...events import TextEvent, page_events

PathLikeStr = os.PathLike[str]

PAGE_BREAK = "\f"


def read_text(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Read a plain-text file as-is.

    ``newline=""`` is used when opening the file to prevent Python from
    converting newline characters.
    """

    with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
        return f.read()


def split_pages(text: str) -> list[str]:
    """Split ``text`` on form feeds, ignoring one trailing break."""

    pages = text.split(PAGE_BREAK)
    if len(pages) > 1 and pages[-1] == "":
        pages.pop()
    return pages


def read_text_events(
    path: str | PathLikeStr,
    *,
    page_tag: str = PAGE_TAG,
    encoding: str = "utf-8-sig",
    **_: object,
) -> Iterator[TextEvent]:
    """Yield the event stream for the plain-text file at ``path``.

    The file is read eagerly so that I/O errors surface before the first
    event.  A newline is appended to every page so that the final word of a
    page is terminated by whitespace.  Options meant for other event sources
    are accepted and ignored.
    """

    text = read_text(path, encoding=encoding)
    pages = [[page + "\n"] for page in split_pages(text)]
    return iter(list(page_events(pages, page_tag)))


__all__ = ["PAGE_BREAK", "read_text", "split_pages", "read_text_events"]
