"""Streaming word tokenizer and page segmenter.

:class:`PageTokenizer` consumes markup events and collects, per page element,
the distinct whitespace separated words in first-seen order.  Every closed page
element is pushed into a :class:`~pagewords.model.DocumentModel`.

State machine
-------------
``page_counter``
    ``-1`` before the document starts and after it ends, ``0`` at document
    start, incremented on every page element start.  It therefore counts the
    pages opened so far; the zero-based number recorded for a closed page is
    ``page_counter - 1``.
``current words``
    Ordered unique accumulator for the page being scanned.  Cleared at
    document start/end and on every page element start; *not* cleared on page
    end.
``buffer``
    The in-progress word fragment.  Cleared at document start/end and whenever
    a completed word is flushed.

Whitespace handling
-------------------
On a whitespace character the buffer becomes a candidate word: it is cleansed
with :func:`cleanse_word` when punctuation removal is on, then stripped.  A
non-empty result is recorded and the buffer cleared.  An empty result leaves
the buffer in place and the whitespace character itself is appended to it, so
a later candidate may start with whitespace (which the strip removes again).

Content after the last whitespace is never flushed at page or document end; a
trailing fragment without whitespace is dropped.

Malformed event ordering, such as a page end without a start or nested page
elements, is not rejected.  Each event is handled on its own.
"""

from __future__ import annotations

from collections.abc import Iterable

from .constants import PAGE_TAG, REMOVE_PUNCTUATION
from .events import TextEvent, feed
from .model import DocumentModel
from .utils.errors import InvalidArgumentError
from .utils.logging import get_logger

logger = get_logger(__name__)


def _peel(word: str) -> str:
    """Drop one non-alphanumeric character from each end of ``word``."""

    if not word:
        return word
    if not word[0].isalnum():
        word = word[1:]
    if word and not word[-1].isalnum():
        word = word[:-1]
    return word


def cleanse_word(word: str) -> str:
    """Strip leading and trailing non-alphanumeric characters from ``word``.

    One character is peeled from each end per round until the word stops
    changing, so stacked punctuation such as ``"(hello)."`` reduces to
    ``"hello"``.  A word made only of punctuation becomes ``""``.  Inner
    punctuation (``"don't"``, ``"e-mail"``) is kept.

    >>> cleanse_word("--world--,")
    'world'
    """

    if word is None:
        raise InvalidArgumentError("word must not be None")
    previous = None
    while previous != word:
        previous = word
        word = _peel(word)
    return word


class _OrderedWordSet:
    """Insertion ordered set of words with O(1) membership checks."""

    __slots__ = ("_order", "_seen")

    def __init__(self) -> None:
        self._order: list[str] = []
        self._seen: set[str] = set()

    def add(self, word: str) -> bool:
        if word in self._seen:
            return False
        self._seen.add(word)
        self._order.append(word)
        return True

    def clear(self) -> None:
        self._order.clear()
        self._seen.clear()

    def snapshot(self) -> list[str]:
        return list(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, word: object) -> bool:
        return word in self._seen


class PageTokenizer:
    """Collect per-page word lists from markup events into ``model``.

    Parameters
    ----------
    model:
        Document model receiving one page per closed page element.
    remove_punctuation:
        Apply :func:`cleanse_word` to every candidate word.
    page_tag:
        Name of the page boundary element, matched case-insensitively.
    """

    def __init__(
        self,
        model: DocumentModel,
        *,
        remove_punctuation: bool = False,
        page_tag: str = PAGE_TAG,
    ) -> None:
        if model is None:
            raise InvalidArgumentError("model must not be None")
        if not page_tag:
            raise InvalidArgumentError("page_tag must be a non-empty string")
        self._model = model
        self._remove_punctuation = bool(remove_punctuation)
        self._page_tag = page_tag.casefold()
        self._page_counter = -1
        self._words = _OrderedWordSet()
        self._buffer: list[str] = []

    @classmethod
    def with_flags(
        cls, model: DocumentModel, *flags: str, page_tag: str = PAGE_TAG
    ) -> "PageTokenizer":
        """Create a tokenizer from textual processing flags.

        ``"remove-punctuation"`` enables cleansing; other flags are ignored.
        """

        return cls(model, remove_punctuation=REMOVE_PUNCTUATION in flags, page_tag=page_tag)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def model(self) -> DocumentModel:
        return self._model

    @property
    def remove_punctuation(self) -> bool:
        return self._remove_punctuation

    @property
    def page_tag(self) -> str:
        return self._page_tag

    @property
    def page_counter(self) -> int:
        return self._page_counter

    @property
    def page_index(self) -> int:
        """Zero-based number of the page currently being scanned."""

        return self._page_counter - 1

    @property
    def current_words(self) -> list[str]:
        return self._words.snapshot()

    @property
    def buffer(self) -> str:
        return "".join(self._buffer)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _is_page_tag(self, tag: str) -> bool:
        return tag is not None and tag.casefold() == self._page_tag

    def on_document_start(self) -> None:
        self._page_counter = 0
        self._words.clear()
        self._buffer.clear()

    def on_element_start(self, tag: str) -> None:
        if self._is_page_tag(tag):
            self._page_counter += 1
            self._words.clear()

    def on_characters(self, run: str) -> None:
        if run is None:
            raise InvalidArgumentError("character run must not be None")
        for ch in run:
            if ch.isspace():
                word = "".join(self._buffer)
                if self._remove_punctuation:
                    word = cleanse_word(word)
                word = word.strip()
                if word:
                    self._words.add(word)
                    self._buffer.clear()
                    continue
            self._buffer.append(ch)

    def on_element_end(self, tag: str) -> None:
        if self._is_page_tag(tag):
            words = self._words.snapshot()
            logger.debug("page %d closed with %d words", self.page_index, len(words))
            self._model.add_page(self.page_index, words)

    def on_document_end(self) -> None:
        if self._buffer:
            logger.debug("dropping %d unflushed characters at document end", len(self._buffer))
        self._page_counter = -1
        self._words.clear()
        self._buffer.clear()

    def feed(self, events: Iterable[TextEvent]) -> DocumentModel:
        """Run ``events`` through this tokenizer and return the model."""

        feed(self, events)
        return self._model


__all__ = ["PageTokenizer", "cleanse_word"]
