# appcontext/settings.py
"""
appcontext.settings

Purpose:
    Centralized configuration for context storage, logging and header names.
    Values come from environment variables; unset variables fall back to Field defaults.

Created:
    2026-10-19
"""

from __future__ import annotations

import os
from enum import Enum

from pydantic import BaseModel, Field

from appcontext.contracts.correlation_policy import CorrelationIdPolicy
from appcontext.errors import ConfigurationError

# ----------------------------
# Environment variable constants
# ----------------------------
ENV_STORAGE = "APPCONTEXT_STORAGE"
ENV_LOG_LEVEL = "APPCONTEXT_LOG_LEVEL"
ENV_CORRELATION_HEADER = "APPCONTEXT_CORRELATION_HEADER"


class StorageBackend(str, Enum):
    NULL = "null"
    IN_MEMORY = "in_memory"
    CONTEXTVAR = "contextvar"


class Settings(BaseModel):
    storage_backend: StorageBackend = Field(default=StorageBackend.CONTEXTVAR)
    log_level: str = Field(default="INFO")
    correlation_id_header: str = Field(default=CorrelationIdPolicy().correlation_id_header)

    def correlation_policy(self) -> CorrelationIdPolicy:
        return CorrelationIdPolicy(
            correlation_id_header=self.correlation_id_header,
            response_header=self.correlation_id_header,
        )


def get_settings() -> Settings:
    values: dict[str, object] = {}

    storage_raw = (os.getenv(ENV_STORAGE) or "").strip().lower()
    if storage_raw:
        try:
            values["storage_backend"] = StorageBackend(storage_raw)
        except ValueError as e:
            raise ConfigurationError(f"Unsupported {ENV_STORAGE} value: {storage_raw}") from e

    log_level = (os.getenv(ENV_LOG_LEVEL) or "").strip().upper()
    if log_level:
        values["log_level"] = log_level

    header = (os.getenv(ENV_CORRELATION_HEADER) or "").strip()
    if header:
        values["correlation_id_header"] = header

    return Settings(**values)
