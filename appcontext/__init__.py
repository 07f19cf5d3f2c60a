"""
appcontext

Request-scoped context (authentication token, correlation id, source IP,
transaction connection) reachable anywhere in the call graph.

Typical bootstrap:

    from appcontext import configure_context, run_in_context, set_correlation_id

    configure_context()                 # once, at process start
    run_in_context(lambda: handle(req)) # per request, sync handler

Async handlers work the same way; await the result so the scope stays open
across every await inside the handler:

    async def handle_async(req):
        set_correlation_id(req.headers["X-Correlation-Id"])
        ...

    await run_in_context(lambda: handle_async(req))
    await run_in_context(handler_object)  # object with `async def __call__`
"""

from appcontext.bootstrap import build_storage, configure_context, register_storage_backend
from appcontext.context import (
    ApplicationContext,
    bound_transaction_connection,
    clean_transaction_connection,
    get_application_context,
    get_correlation_id,
    get_source_ip,
    get_transaction_connection,
    reset_application_context,
    run_in_context,
    set_authentication_token,
    set_correlation_id,
    set_source_ip,
    set_transaction_connection,
    use_storage,
)
from appcontext.contracts.context_keys import ContextKey
from appcontext.contracts.database_transaction import DatabaseTransactionConnection
from appcontext.errors import AppContextError, ConfigurationError, UnwrapError
from appcontext.option import NOTHING, Option, Some
from appcontext.settings import Settings, StorageBackend, get_settings
from appcontext.storage import (
    ContextStorage,
    ContextVarContextStorage,
    InMemoryContextStorage,
    NullContextStorage,
)

__all__ = [
    "AppContextError",
    "ApplicationContext",
    "ConfigurationError",
    "ContextKey",
    "ContextStorage",
    "ContextVarContextStorage",
    "DatabaseTransactionConnection",
    "InMemoryContextStorage",
    "NOTHING",
    "NullContextStorage",
    "Option",
    "Settings",
    "Some",
    "StorageBackend",
    "UnwrapError",
    "bound_transaction_connection",
    "build_storage",
    "clean_transaction_connection",
    "configure_context",
    "get_application_context",
    "get_correlation_id",
    "get_settings",
    "get_source_ip",
    "get_transaction_connection",
    "register_storage_backend",
    "reset_application_context",
    "run_in_context",
    "set_authentication_token",
    "set_correlation_id",
    "set_source_ip",
    "set_transaction_connection",
    "use_storage",
]
