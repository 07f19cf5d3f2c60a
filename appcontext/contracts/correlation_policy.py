"""
appcontext.contracts.correlation_policy

Purpose:
    Central policy for the inbound/outbound headers the context middleware reads and writes.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CorrelationIdPolicy:
    correlation_id_header: str = "X-Correlation-Id"
    request_id_header: str = "X-Request-Id"
    response_header: str = "X-Correlation-Id"
    forwarded_for_header: str = "X-Forwarded-For"
    authorization_header: str = "Authorization"
