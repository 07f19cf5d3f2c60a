"""
appcontext.storage.in_memory_storage

Purpose:
    Backend holding one dict shared by every caller.

Notes:
    run() does not open a new scope, so there is no per-request isolation.
    Only use this single-threaded or in tests; concurrent requests will overwrite each other.

Created:
    2026-10-19
"""

from __future__ import annotations

from typing import Any, Callable, Dict, TypeVar

from appcontext.option import Option

R = TypeVar("R")


class InMemoryContextStorage:
    def __init__(self) -> None:
        self.storage: Dict[str, Any] = {}

    def get(self, key: str) -> Option[Any]:
        # A key set to None reads as absent (that is how fields get cleared).
        return Option.of(self.storage.get(key))

    def set(self, key: str, value: Any) -> None:
        self.storage[key] = value

    def run(self, fn: Callable[[], R]) -> R:
        return fn()

    def __repr__(self) -> str:
        return f"InMemoryContextStorage(keys={sorted(self.storage)})"
