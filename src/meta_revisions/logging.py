"""Logging setup for processes embedding the revisioning core."""

from __future__ import annotations

import logging
from pathlib import Path

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"


def configure_logging(level: str = "INFO", *, log_file: str | Path | None = None) -> None:
    """Attach console (and optionally file) handlers to the package logger."""
    package_logger = logging.getLogger("meta_revisions")
    package_logger.setLevel(level.upper())

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(_FORMAT)
    console = logging.StreamHandler()
    console.setFormatter(formatter)
    package_logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    # Cosmos SDK logs every HTTP request at INFO.
    logging.getLogger("azure").setLevel(logging.WARNING)
