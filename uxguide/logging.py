"""Logger hierarchy and handler setup shared by the CLI, service and plugin."""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "uxguide"
CONSOLE_FORMAT = "[uxguide] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``uxguide.<name>``, or the package root logger when ``name`` is empty."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def configure_logging(*, verbose: bool = False, log_file: Path | None = None) -> logging.Logger:
    """Route uxguide records to stderr and, when ``log_file`` is set, append them to that file.

    Debug output needs ``verbose``; otherwise only warnings and errors are shown.
    Calling this again replaces (and closes) the handlers from the previous call.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_handler(logging.StreamHandler(), level, CONSOLE_FORMAT))
    if log_file is not None:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_handler(logging.FileHandler(path, encoding="utf-8"), level, FILE_FORMAT))
        logger.debug("Writing log records to %s", path)

    return logger


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


__all__ = ["CONSOLE_FORMAT", "FILE_FORMAT", "ROOT_LOGGER", "configure_logging", "get_logger"]
