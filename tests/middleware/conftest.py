"""
tests.middleware.conftest

App/client fixtures for middleware tests.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from appcontext.context import ApplicationContext
from appcontext.contracts.context_keys import ContextKey
from appcontext.contracts.correlation_policy import CorrelationIdPolicy
from appcontext.middleware.context_middleware import ApplicationContextMiddleware


def create_test_app(context: ApplicationContext | None, policy: CorrelationIdPolicy | None = None) -> FastAPI:
    app = FastAPI()
    app.add_middleware(ApplicationContextMiddleware, policy=policy, context=context)

    def _ctx() -> ApplicationContext:
        if context is not None:
            return context
        from appcontext.context import get_application_context

        return get_application_context()

    @app.get("/whoami")
    async def whoami():
        ctx = _ctx()
        token = ctx.storage.get(ContextKey.AUTHENTICATION_TOKEN.value).unwrap_or(None)
        return {
            "correlation_id": ctx.get_correlation_id(),
            "source_ip": ctx.get_source_ip(),
            "authentication_token": token,
        }

    return app


@pytest.fixture()
def client_factory():
    """
    Factory fixture that creates a fresh TestClient around a given context.
    """

    def _make(context: ApplicationContext | None = None, policy: CorrelationIdPolicy | None = None) -> TestClient:
        return TestClient(create_test_app(context, policy), raise_server_exceptions=True)

    return _make
