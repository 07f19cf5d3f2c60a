"""
tests.test_settings_bootstrap

Purpose:
    Environment-driven settings and backend installation at startup.
"""

from __future__ import annotations

import logging

import pytest

import appcontext
from appcontext.bootstrap import build_storage, configure_context, register_storage_backend
from appcontext.context import ApplicationContext
from appcontext.errors import ConfigurationError
from appcontext.logging.context_filter import ContextLogFilter
from appcontext.settings import (
    ENV_CORRELATION_HEADER,
    ENV_LOG_LEVEL,
    ENV_STORAGE,
    Settings,
    StorageBackend,
    get_settings,
)
from appcontext.storage.contextvar_storage import ContextVarContextStorage
from appcontext.storage.in_memory_storage import InMemoryContextStorage
from appcontext.storage.null_storage import NullContextStorage


@pytest.fixture()
def clean_env(monkeypatch):
    for name in (ENV_STORAGE, ENV_LOG_LEVEL, ENV_CORRELATION_HEADER):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    settings = get_settings()
    assert settings.storage_backend is StorageBackend.CONTEXTVAR
    assert settings.log_level == "INFO"
    assert settings.correlation_id_header == "X-Correlation-Id"


def test_env_overrides(clean_env) -> None:
    clean_env.setenv(ENV_STORAGE, " In_Memory ")
    clean_env.setenv(ENV_LOG_LEVEL, "debug")
    clean_env.setenv(ENV_CORRELATION_HEADER, "X-Trace-Id")

    settings = get_settings()
    assert settings.storage_backend is StorageBackend.IN_MEMORY
    assert settings.log_level == "DEBUG"

    policy = settings.correlation_policy()
    assert policy.correlation_id_header == "X-Trace-Id"
    assert policy.response_header == "X-Trace-Id"


def test_unknown_backend_fails_fast(clean_env) -> None:
    clean_env.setenv(ENV_STORAGE, "redis")
    with pytest.raises(ConfigurationError, match="redis"):
        get_settings()


@pytest.mark.parametrize(
    "kind,expected",
    [
        (StorageBackend.NULL, NullContextStorage),
        (StorageBackend.IN_MEMORY, InMemoryContextStorage),
        (StorageBackend.CONTEXTVAR, ContextVarContextStorage),
    ],
)
def test_build_storage(kind, expected) -> None:
    assert isinstance(build_storage(kind), expected)


def test_build_storage_returns_fresh_instances() -> None:
    assert build_storage(StorageBackend.IN_MEMORY) is not build_storage(StorageBackend.IN_MEMORY)


def test_configure_context_installs_on_global_facade() -> None:
    ctx = configure_context(Settings(storage_backend=StorageBackend.IN_MEMORY))

    assert ctx is appcontext.get_application_context()
    appcontext.set_correlation_id("boot")
    assert appcontext.get_correlation_id() == "boot"


def test_configure_context_reads_env_when_no_settings(clean_env) -> None:
    clean_env.setenv(ENV_STORAGE, "null")
    ctx = configure_context()
    assert isinstance(ctx.storage, NullContextStorage)


def test_configure_context_targets_explicit_instance() -> None:
    local = ApplicationContext()
    configure_context(Settings(storage_backend=StorageBackend.CONTEXTVAR), context=local)

    assert isinstance(local.storage, ContextVarContextStorage)
    assert isinstance(appcontext.get_application_context().storage, NullContextStorage)


def test_registered_builder_replaces_default() -> None:
    custom = InMemoryContextStorage()
    register_storage_backend(StorageBackend.IN_MEMORY, lambda: custom)
    try:
        ctx = configure_context(
            Settings(storage_backend=StorageBackend.IN_MEMORY), context=ApplicationContext()
        )
        assert ctx.storage is custom
    finally:
        register_storage_backend(StorageBackend.IN_MEMORY, InMemoryContextStorage)


def _context_handlers() -> list[logging.Handler]:
    return [
        h for h in logging.getLogger().handlers
        if any(isinstance(f, ContextLogFilter) for f in h.filters)
    ]


def test_log_level_env_applies_on_configure(clean_env) -> None:
    clean_env.setenv(ENV_LOG_LEVEL, "debug")
    configure_context(context=ApplicationContext())

    assert logging.getLogger().level == logging.DEBUG
    handlers = _context_handlers()
    assert len(handlers) == 1
    assert handlers[0].level == logging.DEBUG
    assert logging.getLogger("uvicorn.access").level == logging.DEBUG


def test_reconfigure_replaces_log_level(clean_env) -> None:
    configure_context(Settings(log_level="DEBUG"), context=ApplicationContext())
    configure_context(Settings(log_level="WARNING"), context=ApplicationContext())

    handlers = _context_handlers()
    assert len(handlers) == 1
    assert handlers[0].level == logging.WARNING
    assert logging.getLogger().level == logging.WARNING


def test_configured_logging_reads_the_configured_context() -> None:
    ctx = configure_context(
        Settings(storage_backend=StorageBackend.IN_MEMORY), context=ApplicationContext()
    )
    ctx.set_correlation_id("boot-42")

    record = logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)
    for f in _context_handlers()[0].filters:
        f.filter(record)
    assert record.correlation_id == "boot-42"
