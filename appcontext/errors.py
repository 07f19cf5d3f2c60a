"""
appcontext.errors

Purpose:
    Exception types raised by appcontext.
    Missing keys are never errors (see appcontext.option); these cover misuse and bad config.

Created:
    2026-10-19
"""

from __future__ import annotations


class AppContextError(Exception):
    """Base class for appcontext errors."""


class UnwrapError(AppContextError):
    """Raised when unwrap() is called on an absent Option."""


class ConfigurationError(AppContextError):
    """Raised when settings name a storage backend that is not registered."""
