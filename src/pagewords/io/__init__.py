"""Extension based registry for event sources and document writers.

Readers turn a file into a stream of :mod:`pagewords.events` objects; writers
persist a :class:`~pagewords.model.DocumentModel`.  The registry dispatches
based on the file extension, case-insensitively.  By default ``.pdf``,
``.xhtml``/``.html``/``.htm`` and ``.txt`` readers and a ``.json`` writer are
registered.

``UnsupportedFormatError`` is raised when attempting to read or write a file
whose extension has no registered handler.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Callable

from ..constants import JSON_SUFFIX
from ..events import TextEvent
from ..model import DocumentModel
from ..utils.errors import UnsupportedFormatError
from .readers.markup_reader import read_markup_events
from .readers.pdf_reader import read_pdf_events
from .readers.txt_reader import read_text_events
from .writers.json_writer import write_document

ReaderFunc = Callable[..., Iterable[TextEvent]]
WriterFunc = Callable[..., None]

_READERS: dict[str, ReaderFunc] = {}
_WRITERS: dict[str, WriterFunc] = {}


def register_reader(ext: str, func: ReaderFunc) -> None:
    """Register an event source for files ending with ``ext``.

    Parameters
    ----------
    ext:
        File extension including the dot (e.g. ``".pdf"``).  Matching is
        case-insensitive.
    func:
        Callable taking a path (plus keyword options) and returning an
        iterable of events.
    """

    _READERS[ext.lower()] = func


def register_writer(ext: str, func: WriterFunc) -> None:
    """Register a document writer for files ending with ``ext``."""

    _WRITERS[ext.lower()] = func


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot).

    Returns an empty string when the path has no extension.
    """

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def supported_extensions() -> tuple[str, ...]:
    """Return the extensions with a registered reader, sorted."""

    return tuple(sorted(_READERS))


def read_events(path: str | os.PathLike[str], **kwargs: Any) -> Iterable[TextEvent]:
    """Return the event stream for ``path`` using the reader for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no reader is registered for the file extension.
    """

    ext = get_extension(path)
    reader = _READERS.get(ext)
    if reader is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    return reader(path, **kwargs)


def write_file(path: str | os.PathLike[str], document: DocumentModel, **kwargs: Any) -> None:
    """Write ``document`` to ``path`` using the writer for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no writer is registered for the file extension.
    """

    ext = get_extension(path)
    writer = _WRITERS.get(ext)
    if writer is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    writer(path, document, **kwargs)


register_reader(".pdf", read_pdf_events)
register_reader(".xhtml", read_markup_events)
register_reader(".html", read_markup_events)
register_reader(".htm", read_markup_events)
register_reader(".txt", read_text_events)
register_writer(JSON_SUFFIX, write_document)

__all__ = [
    "ReaderFunc",
    "WriterFunc",
    "register_reader",
    "register_writer",
    "get_extension",
    "supported_extensions",
    "read_events",
    "write_file",
]
