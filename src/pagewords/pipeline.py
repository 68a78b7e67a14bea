"""Document level extraction pipeline.

:func:`extract_words` is the pure core: it runs one event stream through a
fresh :class:`~pagewords.tokenizer.PageTokenizer` and returns the resulting
:class:`~pagewords.model.DocumentModel`.  The remaining helpers wire the
tokenizer to files on disk:

* :func:`extract_document` reads one file through the I/O registry.
* :func:`process_source` accepts a file or a directory and writes one JSON
  document per input next to each other in ``out_dir``, named
  ``<input file name><suffix>`` (``paper.pdf.json`` by default).

Directories are scanned non-recursively and in sorted order; only files whose
extension is listed in ``cfg.input.extensions`` are picked up.  A document
that fails to parse is logged and recorded in :attr:`ProcessResult.failed`
while the remaining documents are still processed.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .config import ConfigModel
from .constants import PAGE_TAG
from .events import TextEvent
from .io import read_events, write_file
from .model import DocumentModel
from .tokenizer import PageTokenizer
from .utils.errors import ExtractionError, UnsupportedFormatError
from .utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class ProcessResult:
    """Outcome of :func:`process_source`."""

    written: list[Path] = field(default_factory=list)
    failed: dict[Path, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


def extract_words(
    events: Iterable[TextEvent],
    source_name: str | None,
    *,
    remove_punctuation: bool = False,
    page_tag: str = PAGE_TAG,
) -> DocumentModel:
    """Tokenize ``events`` into a new document model named ``source_name``."""

    model = DocumentModel.create(source_name)
    tokenizer = PageTokenizer(model, remove_punctuation=remove_punctuation, page_tag=page_tag)
    return tokenizer.feed(events)


def extract_document(path: str | os.PathLike[str], cfg: ConfigModel) -> DocumentModel:
    """Read ``path`` and return its document model.

    The model's source name is the file name of ``path``.
    """

    source = Path(path)
    events = read_events(source, page_tag=cfg.tokenizer.page_tag)
    model = extract_words(
        events,
        source.name,
        remove_punctuation=cfg.tokenizer.remove_punctuation,
        page_tag=cfg.tokenizer.page_tag,
    )
    logger.info("extracted %d pages from %s", len(model.pages), source.name)
    return model


def output_path_for(source: Path, out_dir: Path, cfg: ConfigModel) -> Path:
    return out_dir / f"{source.name}{cfg.output.suffix}"


def collect_sources(source: Path, cfg: ConfigModel) -> list[Path]:
    """Return the input files for ``source`` (a file or a directory)."""

    if source.is_dir():
        extensions = set(cfg.input.extensions)
        return sorted(
            p for p in source.iterdir() if p.is_file() and p.suffix.lower() in extensions
        )
    if source.is_file():
        return [source]
    return []


def process_source(
    source: str | os.PathLike[str],
    out_dir: str | os.PathLike[str],
    cfg: ConfigModel,
) -> ProcessResult:
    """Extract every input under ``source`` and write JSON files to ``out_dir``.

    I/O errors while creating ``out_dir`` or writing outputs propagate.
    """

    source_path = Path(source)
    out_path = Path(out_dir)
    result = ProcessResult()

    if not source_path.exists():
        logger.warning("Not a valid file or directory, nothing to do: %s", source_path)
        return result

    out_path.mkdir(parents=True, exist_ok=True)
    for item in collect_sources(source_path, cfg):
        try:
            model = extract_document(item, cfg)
        except (ExtractionError, UnsupportedFormatError) as exc:
            logger.error("Failed to process %s: %s", item, exc)
            result.failed[item] = str(exc)
            continue
        target = output_path_for(item, out_path, cfg)
        write_file(target, model, indent=cfg.output.indent, encoding=cfg.output.encoding)
        logger.debug("wrote %s", target)
        result.written.append(target)
    return result


__all__ = [
    "ProcessResult",
    "extract_words",
    "extract_document",
    "output_path_for",
    "collect_sources",
    "process_source",
]
