"""Typer-based command line interface for page word extraction.

``pagewords run`` extracts the words of a single document or of every
matching document in a directory and writes one JSON file per document into
the output directory.  ``pagewords words`` extracts a single document and
prints its JSON to stdout.

Exit codes
----------
0 success
3 I/O error (missing input, unsupported format, filesystem issues)
4 configuration error
5 extraction failure (one or more documents could not be parsed)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import Optional

import typer
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .io import get_extension, supported_extensions
from .pipeline import extract_document, process_source
from .utils.errors import ExtractionError, UnsupportedFormatError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="pagewords",
    help="Extract per-page word lists. Use 'pagewords run' to process files.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None, remove_punctuation: bool | None) -> ConfigModel:
    """Load configuration and apply CLI overrides, exiting with 4 on error."""

    try:
        cfg = load_config(config_path)
    except (ValidationError, Exception) as exc:  # pragma: no cover - diverse
        _safe_exit(4, str(exc).splitlines()[0])
    if remove_punctuation is not None:
        cfg = cfg.model_copy(deep=True)
        cfg.tokenizer.remove_punctuation = remove_punctuation
    return cfg


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


@app.callback()
def main() -> None:
    """Entry point for the pagewords command group."""
    pass


@app.command()
def run(
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Input document or directory of documents"
    ),
    out_dir: Path = typer.Option(..., "--out", help="Output directory for JSON files"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    remove_punctuation: bool | None = typer.Option(  # noqa: B008
        None,
        "--remove-punctuation/--keep-punctuation",
        help="Strip punctuation surrounding each word",
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> list[str]:
    """Extract words from ``in_path`` writing JSON documents to ``out_dir``."""

    configure_logging(verbose)
    cfg = _load(config_path, remove_punctuation)
    if verbose:
        typer.echo(
            f"Loaded config (remove_punctuation={cfg.tokenizer.remove_punctuation})", err=True
        )

    if not in_path.exists():
        _safe_exit(3, f"No such file or directory: '{in_path}'")
    if in_path.is_file() and get_extension(in_path) not in supported_extensions():
        _safe_exit(3, f"Unsupported file extension: '{get_extension(in_path)}'")

    try:
        with Timing() as t_run:
            result = process_source(in_path, out_dir, cfg)
    except (UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))

    if verbose:
        typer.echo(
            f"Wrote {len(result.written)} documents in {t_run.ms:.1f} ms to {out_dir}", err=True
        )
    for failed, reason in result.failed.items():
        typer.echo(f"Failed: {failed}: {reason}", err=True)
    if not result.ok:
        _safe_exit(5, None)

    return [str(p) for p in result.written]


@app.command()
def words(
    in_path: Path = typer.Option(..., "--in", "--input", help="Input document"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    remove_punctuation: bool | None = typer.Option(  # noqa: B008
        None,
        "--remove-punctuation/--keep-punctuation",
        help="Strip punctuation surrounding each word",
    ),
) -> None:
    """Print the JSON document model of a single input to stdout."""

    configure_logging(False)
    cfg = _load(config_path, remove_punctuation)
    try:
        model = extract_document(in_path, cfg)
    except (FileNotFoundError, UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))
    except ExtractionError as exc:
        _safe_exit(5, str(exc))
    typer.echo(model.to_json(indent=cfg.output.indent))
