"""
tests.conftest

Shared pytest fixtures.
"""

from __future__ import annotations

import logging

import pytest

from appcontext.context import ApplicationContext, reset_application_context
from appcontext.storage.contextvar_storage import ContextVarContextStorage
from appcontext.storage.in_memory_storage import InMemoryContextStorage


@pytest.fixture(autouse=True)
def _reset_global_context():
    """
    The process-wide facade is shared across tests; put the Null backend back
    before and after each test so installs never leak.
    """
    reset_application_context()
    yield
    reset_application_context()


@pytest.fixture(autouse=True)
def restore_logging():
    """
    configure_context() and configure_logging() touch global logger state; put it back.
    """
    names = ("", "uvicorn", "uvicorn.error", "uvicorn.access")
    saved = {
        name: (
            list(logging.getLogger(name).handlers),
            logging.getLogger(name).level,
            logging.getLogger(name).propagate,
        )
        for name in names
    }
    yield
    for name, (handlers, level, propagate) in saved.items():
        lg = logging.getLogger(name)
        lg.handlers[:] = handlers
        lg.setLevel(level)
        lg.propagate = propagate


@pytest.fixture()
def in_memory_context() -> ApplicationContext:
    return ApplicationContext(InMemoryContextStorage())


@pytest.fixture()
def contextvar_context() -> ApplicationContext:
    return ApplicationContext(ContextVarContextStorage())


class FakeTransactionConnection:
    """
    Stand-in for the database layer's connection. Records calls; never touches a database.
    """

    def __init__(self, name: str = "conn") -> None:
        self.name = name
        self.queries: list[tuple] = []
        self.closed = False

    async def query(self, statement, parameters=None):
        self.queries.append((statement, parameters))
        return []

    async def transaction(self, handler, transaction_retry_limit=None):
        return await handler(self)

    def __repr__(self) -> str:
        return f"FakeTransactionConnection({self.name!r})"


@pytest.fixture()
def connection_factory():
    def _make(name: str = "conn") -> FakeTransactionConnection:
        return FakeTransactionConnection(name)

    return _make
