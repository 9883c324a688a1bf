"""Domain errors — malformed values and rule violations."""

from __future__ import annotations

from typing import Any

from gatepass_access.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule / invariant is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidPatternError(ValidationError):
    """A grant or feature string cannot be parsed into dot-delimited segments."""

    default_code = "invalid_pattern"

    def __init__(self, pattern: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid feature pattern {pattern!r}: {reason}",
            errors=[{"field": "pattern", "value": repr(pattern), "reason": reason}],
            **kwargs,
        )
        self.pattern = pattern
        self.reason = reason


__all__ = [
    "DomainError",
    "InvalidPatternError",
    "ValidationError",
]
