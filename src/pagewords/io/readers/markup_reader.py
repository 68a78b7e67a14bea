"""XHTML/HTML event source.

Documents already converted to markup (for example XHTML emitted by a PDF
conversion tool with one ``<div class="page">`` per page) are parsed with the
standard library :class:`html.parser.HTMLParser`.  Start tags, end tags and
character data are forwarded as events, bracketed by document start/end
events.  Character references are decoded by the parser.

Block-level elements end with a ``Characters("\\n")`` event emitted just
before their end tag, and ``<br>``/``<hr>`` emit one right after their start
tag, so text of adjacent blocks never runs together into one word.

``<head>``, ``<script>``, ``<style>`` and ``<noscript>`` are not document
content: neither their text nor the tags nested inside them are forwarded.
Tag names arrive lower-cased.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from html.parser import HTMLParser

from ...events import (
    Characters,
    DocumentEnd,
    DocumentStart,
    ElementEnd,
    ElementStart,
    TextEvent,
)
from .txt_reader import read_text

_SKIP_TAGS = frozenset({"head", "script", "style", "noscript"})
_BREAK_TAGS = frozenset({"br", "hr"})
_BLOCK_TAGS = frozenset(
    "address article aside blockquote body caption dd div dl dt figcaption figure"
    " footer form h1 h2 h3 h4 h5 h6 header html li main nav ol p pre section"
    " table td th title tr ul".split()
)
_NEWLINE = "\n"


class _MarkupEventCollector(HTMLParser):
    """Record parser callbacks as :mod:`pagewords.events` objects."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.events: list[TextEvent] = [DocumentStart()]
        self._skip_depth = 0

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in _SKIP_TAGS:
            self._skip_depth += 1
            return
        if self._skip_depth:
            return
        self.events.append(ElementStart(tag))
        if tag in _BREAK_TAGS:
            self.events.append(Characters(_NEWLINE))

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in _SKIP_TAGS or self._skip_depth:
            return
        self.events.append(ElementStart(tag))
        if tag in _BREAK_TAGS or tag in _BLOCK_TAGS:
            self.events.append(Characters(_NEWLINE))
        self.events.append(ElementEnd(tag))

    def handle_endtag(self, tag: str) -> None:
        if tag in _SKIP_TAGS:
            if self._skip_depth > 0:
                self._skip_depth -= 1
            return
        if self._skip_depth:
            return
        if tag in _BLOCK_TAGS:
            self.events.append(Characters(_NEWLINE))
        self.events.append(ElementEnd(tag))

    def handle_data(self, data: str) -> None:
        if self._skip_depth == 0 and data:
            self.events.append(Characters(data))

    def close(self) -> None:
        super().close()
        self.events.append(DocumentEnd())


def parse_markup(markup: str) -> list[TextEvent]:
    """Return the event stream for the ``markup`` string."""

    collector = _MarkupEventCollector()
    collector.feed(markup)
    collector.close()
    return collector.events


def read_markup_events(
    path: str | os.PathLike[str], *, encoding: str = "utf-8-sig", **_: object
) -> Iterator[TextEvent]:
    """Yield the event stream for the markup file at ``path``."""

    return iter(parse_markup(read_text(path, encoding=encoding)))


__all__ = ["parse_markup", "read_markup_events"]
