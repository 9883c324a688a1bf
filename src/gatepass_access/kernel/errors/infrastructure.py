"""Infrastructure errors — persistence failures on the permission path."""

from __future__ import annotations

from typing import Any

from gatepass_access.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class ResolutionError(InfrastructureError):
    """A principal's permissions could not be determined.

    Distinct from "principal has no permissions": callers must fail closed
    and report a server-side failure.
    """

    default_code = "resolution_error"

    def __init__(
        self,
        principal_id: str | None,
        message: str | None = None,
        *,
        source: str | None = None,
        **kwargs: Any,
    ) -> None:
        text = message or f"Could not resolve permissions for principal {principal_id!r}"
        detail = kwargs.pop("detail", None) or {}
        detail.setdefault("principal_id", principal_id)
        if source is not None:
            detail.setdefault("source", source)
        super().__init__(text, detail=detail, **kwargs)
        self.principal_id = principal_id
        self.source = source


__all__ = [
    "InfrastructureError",
    "ResolutionError",
]
