"""JSON writer for document models.

:func:`write_document` persists :meth:`DocumentModel.to_json` output.  Parent
directories are created automatically and the file ends with a newline.
"""

from __future__ import annotations

import os
from pathlib import Path

from ...model import DocumentModel

PathLikeStr = os.PathLike[str]


def write_document(
    path: str | PathLikeStr,
    document: DocumentModel,
    *,
    indent: int | None = 2,
    encoding: str = "utf-8",
) -> None:
    """Write ``document`` to ``path`` as JSON."""

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding, newline="\n") as f:
        f.write(document.to_json(indent=indent))
        f.write("\n")


def read_document(path: str | PathLikeStr, *, encoding: str = "utf-8") -> DocumentModel:
    """Load a document model previously written by :func:`write_document`."""

    with open(path, "r", encoding=encoding) as f:
        return DocumentModel.from_json(f.read())


__all__ = ["write_document", "read_document"]
