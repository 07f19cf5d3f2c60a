"""
appcontext.contracts.context_keys

Purpose:
    Stable key names for the typed context fields.
    Backends only ever see the plain string values.

Created:
    2026-10-19
"""

from __future__ import annotations

from enum import Enum


class ContextKey(str, Enum):
    AUTHENTICATION_TOKEN = "authenticationToken"
    CORRELATION_ID = "correlationId"
    SOURCE_IP = "sourceIP"
    TRANSACTION_CONNECTION = "transactionConnection"
