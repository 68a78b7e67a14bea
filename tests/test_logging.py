from __future__ import annotations

import io
import logging
import sys

import pytest

from pagewords.utils.logging import ROOT_LOGGER_NAME, configure_logging, get_logger


def test_get_logger_namespacing() -> None:
    assert get_logger("pipeline").name == "pagewords.pipeline"
    assert get_logger("pagewords.pipeline") is get_logger("pipeline")
    assert get_logger().name == ROOT_LOGGER_NAME


def test_configure_logging_idempotent() -> None:
    logger = configure_logging(verbose=True)
    configure_logging(verbose=False)
    handlers = [h for h in logger.handlers if h.get_name() == "pagewords-stderr"]
    assert len(handlers) == 1
    assert logger.level == logging.WARNING
    assert handlers[0].level == logging.WARNING


def test_handler_follows_replaced_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    first = io.StringIO()
    monkeypatch.setattr(sys, "stderr", first)
    logger = configure_logging(verbose=False)
    first.close()

    second = io.StringIO()
    monkeypatch.setattr(sys, "stderr", second)
    configure_logging(verbose=False)
    logger.warning("still here")
    assert "still here" in second.getvalue()
