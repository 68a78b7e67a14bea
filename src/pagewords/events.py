"""Markup event types and the driver loop feeding them to a handler.

Event sources (see :mod:`pagewords.io`) produce an ordered stream of the five
event kinds defined here.  :func:`feed` owns the iteration and calls the
matching method of an :class:`EventHandler` for each event, one at a time.
Event ordering is not validated.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, TypeVar, Union, runtime_checkable


@dataclass(slots=True, frozen=True)
class DocumentStart:
    """Start of a document; precedes every other event."""


@dataclass(slots=True, frozen=True)
class ElementStart:
    tag: str


@dataclass(slots=True, frozen=True)
class Characters:
    """A run of decoded characters.  ``text`` may span several words."""

    text: str


@dataclass(slots=True, frozen=True)
class ElementEnd:
    tag: str


@dataclass(slots=True, frozen=True)
class DocumentEnd:
    """End of a document."""


TextEvent = Union[DocumentStart, ElementStart, Characters, ElementEnd, DocumentEnd]


@runtime_checkable
class EventHandler(Protocol):
    """Consumer of markup events."""

    def on_document_start(self) -> None: ...

    def on_element_start(self, tag: str) -> None: ...

    def on_characters(self, run: str) -> None: ...

    def on_element_end(self, tag: str) -> None: ...

    def on_document_end(self) -> None: ...


H = TypeVar("H", bound=EventHandler)


def dispatch(handler: EventHandler, event: TextEvent) -> None:
    """Deliver a single ``event`` to ``handler``."""

    if isinstance(event, Characters):
        handler.on_characters(event.text)
    elif isinstance(event, ElementStart):
        handler.on_element_start(event.tag)
    elif isinstance(event, ElementEnd):
        handler.on_element_end(event.tag)
    elif isinstance(event, DocumentStart):
        handler.on_document_start()
    elif isinstance(event, DocumentEnd):
        handler.on_document_end()
    else:
        raise TypeError(f"unsupported event type: {type(event).__name__}")


def feed(handler: H, events: Iterable[TextEvent]) -> H:
    """Dispatch every event of ``events`` to ``handler`` in order.

    Returns ``handler`` so that calls can be chained.
    """

    for event in events:
        dispatch(handler, event)
    return handler


def page_events(pages: Iterable[Iterable[str]], page_tag: str) -> Iterable[TextEvent]:
    """Yield a complete document stream for pre-split page text.

    Each item of ``pages`` is the sequence of character runs of one page; it
    is wrapped in ``page_tag`` start/end events.
    """

    yield DocumentStart()
    for runs in pages:
        yield ElementStart(page_tag)
        for run in runs:
            yield Characters(run)
        yield ElementEnd(page_tag)
    yield DocumentEnd()


__all__ = [
    "DocumentStart",
    "ElementStart",
    "Characters",
    "ElementEnd",
    "DocumentEnd",
    "TextEvent",
    "EventHandler",
    "dispatch",
    "feed",
    "page_events",
]
