"""Diagnostics for sloc runs.

Discovery warnings (missing paths, unsupported extensions) and unreadable
files are logged under ``sloc.<component>``; the report table itself is
written to stdout by the CLI and never passes through logging.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "sloc"
_CONSOLE_FORMAT = "[sloc] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``sloc.<name>``, e.g. ``get_logger("discovery")``."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def _resolve_level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.INFO


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Set up stderr output for ``-v``/``-q`` and the ``--log-file`` sink.

    ``-v`` shows per-file counts, ``-q`` hides skipped-file warnings. The log
    file always receives DEBUG records regardless of the console level, and
    ``verbose`` wins over ``quiet`` when both are set.
    """
    level = _resolve_level(verbose, quiet)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file is not None else level)
    logger.propagate = False

    # main() may run several times in one process (tests, embedding).
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)

    return logger


__all__ = ["configure_logging", "get_logger"]
