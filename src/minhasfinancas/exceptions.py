"""Error types raised by the entry and user services."""

from __future__ import annotations


class BusinessRuleError(ValueError):
    """Raised when an entity breaks a business rule.

    The message is user-facing and is propagated to callers unchanged.
    """


class MissingIdentifierError(RuntimeError):
    """Raised when an operation needs a persisted entity but got one without an id."""
