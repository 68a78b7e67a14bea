"""Page-indexed word extraction for decoded documents.

The package turns a stream of markup events (page elements and character runs)
into a :class:`~pagewords.model.DocumentModel` holding the distinct words of
every page in first-seen order.
"""

from __future__ import annotations

from .model import DocumentModel, PageRecord
from .pipeline import extract_words
from .tokenizer import PageTokenizer, cleanse_word

__version__ = "0.1.0"

__all__ = [
    "DocumentModel",
    "PageRecord",
    "PageTokenizer",
    "cleanse_word",
    "extract_words",
    "__version__",
]
