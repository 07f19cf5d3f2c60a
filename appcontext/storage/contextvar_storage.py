"""
appcontext.storage.contextvar_storage

Purpose:
    Request-scoped context storage using contextvars.
    Each run() installs a fresh record that stays attached to the current thread or
    asyncio task for the dynamic extent of the wrapped function, across awaits.

Notes:
    - Child tasks created inside a scope copy the context, so they share the parent's record.
    - Outside any scope, get() returns NOTHING and set() is dropped.
    - If fn() returns an awaitable, run() returns an awaitable that keeps the same record
      installed until it completes.

Created:
    2026-10-19
"""

from __future__ import annotations

import contextvars
import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, TypeVar

from appcontext.option import NOTHING, Option

R = TypeVar("R")

logger = logging.getLogger(__name__)


class ContextVarContextStorage:
    def __init__(self, name: str = "appcontext_record") -> None:
        self._record_var: contextvars.ContextVar[Dict[str, Any] | None] = contextvars.ContextVar(
            name,
            default=None,
        )

    def get(self, key: str) -> Option[Any]:
        record = self._record_var.get()
        if record is None:
            return NOTHING
        return Option.of(record.get(key))

    def set(self, key: str, value: Any) -> None:
        record = self._record_var.get()
        if record is None:
            logger.debug("Dropping context write outside of a scope: key=%s", key)
            return
        record[key] = value

    def run(self, fn: Callable[[], Any]) -> Any:
        record: Dict[str, Any] = {}
        token = self._record_var.set(record)
        try:
            result = fn()
        finally:
            self._record_var.reset(token)

        # async def, async __call__ and lambdas returning coroutines all land here.
        if inspect.isawaitable(result):
            return self._await_in_record(record, result)
        return result

    async def _await_in_record(self, record: Dict[str, Any], awaitable: Awaitable[R]) -> R:
        # Reinstalled when awaited, so the record belongs to the awaiting task.
        token = self._record_var.set(record)
        try:
            return await awaitable
        finally:
            self._record_var.reset(token)

    def in_scope(self) -> bool:
        return self._record_var.get() is not None

    def __repr__(self) -> str:
        return f"ContextVarContextStorage(name={self._record_var.name!r})"
