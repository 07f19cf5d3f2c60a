"""
appcontext.bootstrap

Purpose:
    Process bootstrap: build the configured storage backend and install it.

Notes:
    Backends are looked up in a registry keyed by StorageBackend; register extra
    builders with register_storage_backend() before calling configure_context().

Created:
    2026-10-19
"""

from __future__ import annotations

import logging
from typing import Callable, Dict

from appcontext.context import ApplicationContext, get_application_context
from appcontext.errors import ConfigurationError
from appcontext.logging.logging_config import configure_logging
from appcontext.settings import Settings, StorageBackend, get_settings
from appcontext.storage.base import ContextStorage
from appcontext.storage.contextvar_storage import ContextVarContextStorage
from appcontext.storage.in_memory_storage import InMemoryContextStorage
from appcontext.storage.null_storage import NullContextStorage

logger = logging.getLogger(__name__)

StorageBuilder = Callable[[], ContextStorage]
_STORAGE_REGISTRY: Dict[StorageBackend, StorageBuilder] = {}


def register_storage_backend(kind: StorageBackend, builder: StorageBuilder) -> None:
    """
    Register (or replace) the builder used for a backend kind.
    """
    _STORAGE_REGISTRY[kind] = builder


def build_storage(kind: StorageBackend) -> ContextStorage:
    builder = _STORAGE_REGISTRY.get(kind)
    if not builder:
        raise ConfigurationError(f"No storage backend registered for kind={kind.value}")
    return builder()


register_storage_backend(StorageBackend.NULL, NullContextStorage)
register_storage_backend(StorageBackend.IN_MEMORY, InMemoryContextStorage)
register_storage_backend(StorageBackend.CONTEXTVAR, ContextVarContextStorage)


def configure_context(
    settings: Settings | None = None,
    context: ApplicationContext | None = None,
) -> ApplicationContext:
    """
    Install the backend named in settings on `context` (default: the process-wide instance)
    and configure logging at settings.log_level. Call once at startup, before serving traffic.
    """
    settings = settings if settings is not None else get_settings()
    ctx = context if context is not None else get_application_context()

    storage = build_storage(settings.storage_backend)
    ctx.use_storage(storage)

    configure_logging(settings.log_level, ctx)

    logger.info("Context storage configured: backend=%s", settings.storage_backend.value)
    return ctx
