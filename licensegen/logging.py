"""Logging utilities for the license package generator.

Records emitted while the pipeline runs carry the stage they belong to in a
``stage`` attribute (``logger.debug(..., extra={"stage": "write"})``). Both the
console and the log file render it after the level name.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "licensegen"
_CONSOLE_FORMAT = "[licensegen] %(levelname)s%(stage_label)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s%(stage_label)s: %(message)s"


class StageFormatter(logging.Formatter):
    """Formatter that shows the pipeline stage of a record as ``[stage]``."""

    def format(self, record: logging.LogRecord) -> str:
        stage = getattr(record, "stage", None)
        record.stage_label = f" [{stage}]" if stage else ""
        return super().format(record)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the licensegen hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send licensegen records to stderr and, when ``log_file`` is given, to that file.

    Calling it again replaces the handlers installed by the previous call. The
    log file's parent directory is created when missing.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        fmt = _FILE_FORMAT if isinstance(handler, logging.FileHandler) else _CONSOLE_FORMAT
        handler.setFormatter(StageFormatter(fmt))
        logger.addHandler(handler)

    return logger


__all__ = ["StageFormatter", "configure_logging", "get_logger"]
