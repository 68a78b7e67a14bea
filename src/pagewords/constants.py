"""Named policy constants shared across the package."""

from __future__ import annotations

__all__ = ["PAGE_TAG", "REMOVE_PUNCTUATION", "JSON_SUFFIX"]

# Element whose start/end events delimit one page of extracted text.
PAGE_TAG: str = "div"

# Flag name enabling punctuation cleansing of candidate words.
REMOVE_PUNCTUATION: str = "remove-punctuation"

JSON_SUFFIX: str = ".json"
