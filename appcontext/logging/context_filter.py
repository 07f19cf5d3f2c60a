"""
appcontext.logging.context_filter

Purpose:
    Logging filter that injects correlation_id and source_ip from the application context
    into log records.
"""

from __future__ import annotations

import logging

from appcontext.context import ApplicationContext, get_application_context

MISSING_VALUE = "-"


class ContextLogFilter(logging.Filter):
    def __init__(self, context: ApplicationContext | None = None) -> None:
        super().__init__()
        self._context = context

    def filter(self, record: logging.LogRecord) -> bool:
        ctx = self._context if self._context is not None else get_application_context()
        record.correlation_id = ctx.get_correlation_id() or MISSING_VALUE
        record.source_ip = ctx.get_source_ip() or MISSING_VALUE
        return True
