"""Logging setup shared by every entry point that embeds the store."""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Attach console (and optional file) handlers to the package logger."""
    package_logger = logging.getLogger("portfolio_content")
    package_logger.setLevel(level.upper())
    for stale in list(package_logger.handlers):
        package_logger.removeHandler(stale)
        stale.close()

    formatter = logging.Formatter(_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
