"""
appcontext.storage.base

Purpose:
    Storage backend contract used by ApplicationContext.
    New backends implement get/set/run; the facade never branches on backend kind.

Created:
    2026-10-19
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

from appcontext.option import Option

R = TypeVar("R")


@runtime_checkable
class ContextStorage(Protocol):
    def get(self, key: str) -> Option[Any]: ...

    def set(self, key: str, value: Any) -> None: ...

    def run(self, fn: Callable[[], R]) -> R: ...
