"""Logging setup for the slovnik command line entry point.

The engine, service and repository log through ``slovnik.*`` loggers with
structured context (see :mod:`slovnik.utils.observability`). Gradio fires one
HTTP request per keystroke in the search box, so the client logger it uses is
held at ``WARNING`` unless slovnik itself runs at ``DEBUG``.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "SLOVNIK_LOG_LEVEL"
PROJECT_LOGGER = "slovnik"
_CHATTY_LOGGERS = ("httpx",)
_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        return getattr(logging, str(level).strip().upper(), logging.INFO)


def configure_logging(level: Optional[str | int] = None, *, force: bool = False) -> None:
    """Configure root handlers and the ``slovnik`` logger level once per process.

    ``level`` wins over ``SLOVNIK_LOG_LEVEL``; both fall back to ``INFO``.
    Index build and search timings reach the log through
    :class:`~slovnik.utils.telemetry.TelemetryLogger` at ``INFO``.
    """

    global _CONFIGURED

    if _CONFIGURED and not force:
        return

    resolved_level = _resolve_level(level if level is not None else os.environ.get(LOG_LEVEL_ENV))

    logging.basicConfig(level=resolved_level, format=_DEFAULT_FORMAT)
    logging.getLogger(PROJECT_LOGGER).setLevel(resolved_level)

    chatty_level = logging.DEBUG if resolved_level <= logging.DEBUG else logging.WARNING
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(chatty_level)
    _CONFIGURED = True


__all__ = ["LOG_LEVEL_ENV", "PROJECT_LOGGER", "configure_logging"]
