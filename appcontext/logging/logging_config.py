"""
appcontext.logging.logging_config

Purpose:
    Central logging configuration.
    Ensures correlation_id/source_ip are present in logs (including uvicorn.access and uvicorn.error).

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from appcontext.context import ApplicationContext
from appcontext.logging.context_filter import ContextLogFilter

LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | correlation_id=%(correlation_id)s "
    "| source_ip=%(source_ip)s | %(name)s | %(message)s"
)


def _make_handler(level: int, context: ApplicationContext | None) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.addFilter(ContextLogFilter(context))
    return handler


def _configure_logger(logger_name: str, handler: logging.Handler, level: int, *, clear_handlers: bool) -> None:
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    if clear_handlers:
        logger.handlers.clear()

    logger.addHandler(handler)
    logger.propagate = False


def configure_logging(level: str | int = logging.INFO, context: ApplicationContext | None = None) -> logging.Handler:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = _make_handler(level, context)

    # Root/app logs: only swap out our own earlier handler, leave other libs' handlers alone.
    root = logging.getLogger()
    root.setLevel(level)
    for existing in list(root.handlers):
        if any(isinstance(f, ContextLogFilter) for f in existing.filters):
            root.removeHandler(existing)
    root.addHandler(handler)

    # Uvicorn uses these loggers; clear their handlers so our formatter/filter wins.
    _configure_logger("uvicorn", handler, level, clear_handlers=True)
    _configure_logger("uvicorn.error", handler, level, clear_handlers=True)
    _configure_logger("uvicorn.access", handler, level, clear_handlers=True)

    return handler
