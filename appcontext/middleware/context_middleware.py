"""
appcontext.middleware.context_middleware

Purpose:
    Middleware that opens a context scope per request, fills the typed context fields
    from the request, and echoes the correlation id on the response.

Created:
    2026-10-19
"""

from __future__ import annotations

import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from appcontext.context import ApplicationContext, get_application_context
from appcontext.contracts.correlation_policy import CorrelationIdPolicy
from appcontext.settings import get_settings


def _source_ip(request: Request, policy: CorrelationIdPolicy) -> str:
    forwarded = request.headers.get(policy.forwarded_for_header)
    if forwarded:
        # First entry is the original client; the rest are proxies.
        first = forwarded.split(",")[0].strip()
        if first:
            return first

    if request.client is not None:
        return request.client.host or ""
    return ""


class ApplicationContextMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app,
        policy: CorrelationIdPolicy | None = None,
        context: ApplicationContext | None = None,
    ) -> None:
        super().__init__(app)
        # Header names come from settings (APPCONTEXT_CORRELATION_HEADER) unless given.
        self._policy = policy if policy is not None else get_settings().correlation_policy()
        self._context = context

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        policy = self._policy
        ctx = self._context if self._context is not None else get_application_context()

        incoming = (
            request.headers.get(policy.correlation_id_header)
            or request.headers.get(policy.request_id_header)
        )
        correlation_id = incoming if incoming else str(uuid.uuid4())

        async def _handle() -> Response:
            ctx.set_correlation_id(correlation_id)
            ctx.set_source_ip(_source_ip(request, policy))

            authorization = request.headers.get(policy.authorization_header)
            if authorization:
                ctx.set_authentication_token(authorization)

            # Attach for handlers that prefer request.state
            request.state.correlation_id = correlation_id

            response: Response = await call_next(request)

            # Echo back for client correlation
            response.headers[policy.response_header] = correlation_id
            return response

        return await ctx.run_in_context(_handle)
