"""
appcontext.context

Purpose:
    ApplicationContext: one active storage backend plus typed accessors for the
    request-scoped fields (authentication token, correlation id, source IP,
    transaction connection).

Design Goals:
    - ApplicationContext is a plain object; construct one per app/test and pass it down.
    - The module-level functions wrap a single default instance for call sites that
      cannot be wired explicitly (loggers, repositories deep in the call graph).
    - Default backend is NullContextStorage, so nothing here raises before configuration.

Created:
    2026-10-19
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, TypeVar

from appcontext.contracts.context_keys import ContextKey
from appcontext.contracts.database_transaction import DatabaseTransactionConnection
from appcontext.option import Option
from appcontext.storage.base import ContextStorage
from appcontext.storage.null_storage import NullContextStorage

R = TypeVar("R")


class ApplicationContext:
    def __init__(self, storage: ContextStorage | None = None) -> None:
        self._storage: ContextStorage = storage if storage is not None else NullContextStorage()

    @property
    def storage(self) -> ContextStorage:
        return self._storage

    def use_storage(self, storage: ContextStorage) -> None:
        """
        Replace the active backend. Data held by the previous backend is not carried over.
        Call once at startup; swapping mid-traffic races with in-flight requests.
        """
        self._storage = storage

    def run_in_context(self, fn: Callable[[], R]) -> R:
        """
        Run fn inside a scope opened by the active backend and return its result.
        For async functions the result is an awaitable.
        """
        return self._storage.run(fn)

    # ----------------------------
    # Typed accessors
    # ----------------------------

    def set_authentication_token(self, authentication_token: str) -> None:
        self._storage.set(ContextKey.AUTHENTICATION_TOKEN.value, authentication_token)

    def set_correlation_id(self, correlation_id: str) -> None:
        self._storage.set(ContextKey.CORRELATION_ID.value, correlation_id)

    def set_source_ip(self, source_ip: str) -> None:
        self._storage.set(ContextKey.SOURCE_IP.value, source_ip)

    def get_correlation_id(self) -> str:
        return self._storage.get(ContextKey.CORRELATION_ID.value).unwrap_or("")

    def get_source_ip(self) -> str:
        return self._storage.get(ContextKey.SOURCE_IP.value).unwrap_or("")

    def get_transaction_connection(self) -> Option[DatabaseTransactionConnection]:
        # No fallback: absence means no transaction is active.
        return self._storage.get(ContextKey.TRANSACTION_CONNECTION.value)

    def set_transaction_connection(
        self, transaction_connection: DatabaseTransactionConnection | None = None
    ) -> None:
        self._storage.set(ContextKey.TRANSACTION_CONNECTION.value, transaction_connection)

    def clean_transaction_connection(self) -> None:
        self._storage.set(ContextKey.TRANSACTION_CONNECTION.value, None)

    def __repr__(self) -> str:
        return f"ApplicationContext(storage={self._storage!r})"


@contextmanager
def bound_transaction_connection(
    connection: DatabaseTransactionConnection,
    context: ApplicationContext | None = None,
) -> Iterator[DatabaseTransactionConnection]:
    """
    Expose `connection` as the active transaction connection for the block, then clear it.
    The connection itself is left open; closing it belongs to the database layer.
    """
    ctx = context if context is not None else _default_context
    ctx.set_transaction_connection(connection)
    try:
        yield connection
    finally:
        ctx.clean_transaction_connection()


# ----------------------------
# Process-wide convenience facade
# ----------------------------

_default_context = ApplicationContext()


def get_application_context() -> ApplicationContext:
    return _default_context


def reset_application_context() -> None:
    """Reinstall a NullContextStorage on the default instance (used by tests)."""
    _default_context.use_storage(NullContextStorage())


def use_storage(storage: ContextStorage) -> None:
    _default_context.use_storage(storage)


def run_in_context(fn: Callable[[], R]) -> R:
    return _default_context.run_in_context(fn)


def set_authentication_token(authentication_token: str) -> None:
    _default_context.set_authentication_token(authentication_token)


def set_correlation_id(correlation_id: str) -> None:
    _default_context.set_correlation_id(correlation_id)


def set_source_ip(source_ip: str) -> None:
    _default_context.set_source_ip(source_ip)


def get_correlation_id() -> str:
    return _default_context.get_correlation_id()


def get_source_ip() -> str:
    return _default_context.get_source_ip()


def get_transaction_connection() -> Option[DatabaseTransactionConnection]:
    return _default_context.get_transaction_connection()


def set_transaction_connection(
    transaction_connection: DatabaseTransactionConnection | None = None,
) -> None:
    _default_context.set_transaction_connection(transaction_connection)


def clean_transaction_connection() -> None:
    _default_context.clean_transaction_connection()


__all__ = [
    "ApplicationContext",
    "bound_transaction_connection",
    "clean_transaction_connection",
    "get_application_context",
    "get_correlation_id",
    "get_source_ip",
    "get_transaction_connection",
    "reset_application_context",
    "run_in_context",
    "set_authentication_token",
    "set_correlation_id",
    "set_source_ip",
    "set_transaction_connection",
    "use_storage",
]
