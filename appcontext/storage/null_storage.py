"""
appcontext.storage.null_storage

Purpose:
    Backend that stores nothing. Installed by default so context calls made before
    configuration are safe no-ops.

Created:
    2026-10-19
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from appcontext.option import NOTHING, Option

R = TypeVar("R")


class NullContextStorage:
    def get(self, key: str) -> Option[Any]:
        return NOTHING

    def set(self, key: str, value: Any) -> None:
        return None

    def run(self, fn: Callable[[], R]) -> R:
        return fn()

    def __repr__(self) -> str:
        return "NullContextStorage()"
