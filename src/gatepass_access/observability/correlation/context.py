"""Observability – RequestContext, CorrelationContext."""
from __future__ import annotations

import dataclasses
from contextvars import ContextVar
from uuid import uuid4


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Ambient context for a single request/use-case execution."""
    correlation_id: str
    user_id: str | None = None

    @classmethod
    def new(cls, user_id: str | None = None) -> "RequestContext":
        return cls(correlation_id=str(uuid4()), user_id=user_id)


_CTX_VAR: ContextVar[RequestContext | None] = ContextVar("_gp_request_ctx", default=None)


class CorrelationContext:
    """Ambient correlation context stored in a ``ContextVar``."""

    @staticmethod
    def set(ctx: RequestContext) -> None:
        _CTX_VAR.set(ctx)

    @staticmethod
    def get() -> RequestContext | None:
        return _CTX_VAR.get()

    @staticmethod
    def get_or_new() -> RequestContext:
        ctx = _CTX_VAR.get()
        if ctx is None:
            ctx = RequestContext.new()
            _CTX_VAR.set(ctx)
        return ctx

    @staticmethod
    def clear() -> None:
        _CTX_VAR.set(None)

    @staticmethod
    def set_from_headers(headers: dict[str, str], user_id: str | None = None) -> RequestContext:
        """Extract the correlation id from HTTP headers and store it.

        ``X-Correlation-ID`` wins over ``X-Request-ID``; a UUID is generated
        when neither is present.  Header names are matched case-insensitively.
        """
        norm = {k.lower(): v for k, v in headers.items()}
        correlation_id = (
            norm.get("x-correlation-id")
            or norm.get("x-request-id")
            or str(uuid4())
        )
        ctx = RequestContext(correlation_id=correlation_id, user_id=user_id)
        _CTX_VAR.set(ctx)
        return ctx


__all__ = ["CorrelationContext", "RequestContext"]
