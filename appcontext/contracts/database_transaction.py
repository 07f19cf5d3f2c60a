"""
appcontext.contracts.database_transaction

Purpose:
    Shape of the transaction connection object supplied by the database layer.
    appcontext only stores and returns it by reference; it never calls or closes it.

Created:
    2026-10-19
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

TransactionFunction = Callable[["DatabaseTransactionConnection"], Awaitable[T]]


@runtime_checkable
class DatabaseTransactionConnection(Protocol):
    async def query(self, statement: Any, parameters: Any = None) -> Any: ...

    async def transaction(
        self,
        handler: TransactionFunction[T],
        transaction_retry_limit: Optional[int] = None,
    ) -> T: ...
