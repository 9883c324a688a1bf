"""Kernel access – ``@require_feature`` decorator for async request handlers."""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, TypeVar

from gatepass_access.kernel.access.context import PrincipalContext
from gatepass_access.kernel.access.gate import AuthorizationGate
from gatepass_access.kernel.errors import ForbiddenError

F = TypeVar("F", bound=Callable[..., Any])


def require_feature(feature: str, gate: AuthorizationGate) -> Callable[[F], F]:
    """Decorator that enforces *feature* for the principal in :class:`PrincipalContext`.

    Raises :class:`UnauthorizedError` if there is no principal in context and
    :class:`ForbiddenError` if the principal is not granted *feature*.
    :class:`ResolutionError` propagates unchanged so the handler is never
    entered when permissions could not be determined.

    Example::

        @require_feature("gatePass.approve.submit", gate)
        async def approve_gate_pass(pass_id: str) -> None:
            ...
    """

    def decorator(fn: F) -> F:
        if not inspect.iscoroutinefunction(fn):
            raise TypeError(f"@require_feature needs an async callable, got {fn!r}")

        @functools.wraps(fn)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            principal_id = PrincipalContext.require()
            if not await gate.check(principal_id, feature):
                raise ForbiddenError(
                    f"principal {principal_id!r} lacks feature {feature!r}",
                    permission=feature,
                )
            return await fn(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["require_feature"]
