"""Document model produced by the tokenizer.

A :class:`DocumentModel` owns the ordered list of :class:`PageRecord` objects
for a single source document.  Pages are appended through
:meth:`DocumentModel.add_page` only, in the order page boundaries are closed in
the event stream.  No reordering or de-duplication across pages takes place and
duplicate page numbers are kept as given.

Serialized shape
----------------
:meth:`DocumentModel.to_dict` returns::

    {
        "pdf_file_name": "<source name>",
        "pages": [{"page_number": 0, "words": ["alpha", "beta"]}, ...],
    }

Keys whose value is ``None`` are omitted.  :meth:`DocumentModel.from_dict`
accepts the same shape and raises :class:`DocumentFormatError` otherwise.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .utils.errors import DocumentFormatError

__all__ = ["PageRecord", "DocumentModel"]

_SOURCE_KEY = "pdf_file_name"
_PAGES_KEY = "pages"
_PAGE_NUMBER_KEY = "page_number"
_WORDS_KEY = "words"


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


@dataclass(slots=True, frozen=True)
class PageRecord:
    """Distinct words of one page in first-seen order."""

    page_number: int
    words: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({_PAGE_NUMBER_KEY: self.page_number, _WORDS_KEY: list(self.words)})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PageRecord":
        """Build a page from its serialized mapping."""

        if not isinstance(data, Mapping):
            raise DocumentFormatError(f"page entry must be an object, got {type(data).__name__}")
        number = data.get(_PAGE_NUMBER_KEY)
        if isinstance(number, bool) or not isinstance(number, int):
            raise DocumentFormatError(f"'{_PAGE_NUMBER_KEY}' must be an integer, got {number!r}")
        words = data.get(_WORDS_KEY)
        if words is None:
            words = []
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise DocumentFormatError(f"'{_WORDS_KEY}' must be a list of strings")
        return cls(page_number=number, words=tuple(words))


class DocumentModel:
    """Ordered page records for one source document.

    ``source_name`` is fixed at creation.  ``pages`` is exposed as a tuple
    snapshot; the only mutation point is :meth:`add_page`.
    """

    __slots__ = ("_source_name", "_pages")

    def __init__(self, source_name: str | None, pages: Iterable[PageRecord] | None = None) -> None:
        self._source_name = source_name
        self._pages: list[PageRecord] = list(pages) if pages is not None else []

    @classmethod
    def create(
        cls, source_name: str | None, pages: Iterable[PageRecord] | None = None
    ) -> "DocumentModel":
        """Return a model for ``source_name``, empty unless ``pages`` is given."""

        return cls(source_name, pages)

    @property
    def source_name(self) -> str | None:
        return self._source_name

    @property
    def pages(self) -> tuple[PageRecord, ...]:
        return tuple(self._pages)

    def add_page(self, page_number: int, words: Iterable[str] | None) -> PageRecord:
        """Append a page built from ``page_number`` and ``words``.

        ``None`` words are treated as an empty page.  The appended record is
        returned for convenience.
        """

        page = PageRecord(page_number=page_number, words=tuple(words) if words is not None else ())
        self._pages.append(page)
        return page

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return _drop_none(
            {
                _SOURCE_KEY: self._source_name,
                _PAGES_KEY: [page.to_dict() for page in self._pages],
            }
        )

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DocumentModel":
        if not isinstance(data, Mapping):
            raise DocumentFormatError("document must be a JSON object")
        source_name = data.get(_SOURCE_KEY)
        if source_name is not None and not isinstance(source_name, str):
            raise DocumentFormatError(f"'{_SOURCE_KEY}' must be a string")
        pages = data.get(_PAGES_KEY)
        if pages is None:
            pages = []
        if not isinstance(pages, list):
            raise DocumentFormatError(f"'{_PAGES_KEY}' must be a list")
        return cls(source_name, [PageRecord.from_dict(page) for page in pages])

    @classmethod
    def from_json(cls, text: str) -> "DocumentModel":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentFormatError(f"invalid JSON: {exc.msg}") from exc
        return cls.from_dict(data)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DocumentModel):
            return NotImplemented
        return self._source_name == other._source_name and self._pages == other._pages

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DocumentModel(source_name={self._source_name!r}, pages={self._pages!r})"
