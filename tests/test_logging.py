"""Tests for licensegen.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from licensegen.logging import StageFormatter, configure_logging, get_logger


def test_get_logger_is_namespaced() -> None:
    assert get_logger("writer").name == "licensegen.writer"
    assert get_logger().name == "licensegen"


def test_configure_logging_replaces_handlers(tmp_path: Path) -> None:
    configure_logging()
    logger = configure_logging(verbose=True, log_file=tmp_path / "run.log")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    get_logger("test").debug("hello from the test")
    for handler in logger.handlers:
        handler.flush()
    assert "hello from the test" in (tmp_path / "run.log").read_text(encoding="utf-8")

    configure_logging()
    assert len(logger.handlers) == 1


def test_records_show_their_pipeline_stage(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "run.log"
    logger = configure_logging(verbose=True, log_file=log_file)

    get_logger("orchestrator").debug("Entered from start", extra={"stage": "write"})
    get_logger("cli").info("no stage here")
    for handler in logger.handlers:
        handler.flush()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert lines[0].endswith("DEBUG licensegen.orchestrator [write]: Entered from start")
    assert lines[1].endswith("INFO licensegen.cli: no stage here")
    configure_logging()


def test_stage_formatter_console_format() -> None:
    formatter = StageFormatter("[licensegen] %(levelname)s%(stage_label)s %(message)s")
    record = logging.LogRecord("licensegen.x", logging.INFO, __file__, 1, "hello", None, None)

    assert formatter.format(record) == "[licensegen] INFO hello"
    record.stage = "commit"
    assert formatter.format(record) == "[licensegen] INFO [commit] hello"
