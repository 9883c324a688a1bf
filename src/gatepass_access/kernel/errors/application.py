"""Application-layer errors — raised at the request-handling boundary."""

from __future__ import annotations

from typing import Any

from gatepass_access.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """No authenticated principal is available."""

    default_code = "unauthorized"


class ForbiddenError(ApplicationError):
    """Authenticated principal lacks the requested feature."""

    default_code = "forbidden"

    def __init__(
        self,
        message: str = "Access denied",
        *,
        permission: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.permission = permission


__all__ = [
    "ApplicationError",
    "ForbiddenError",
    "UnauthorizedError",
]
