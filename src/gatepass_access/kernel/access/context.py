"""Kernel access – PrincipalContext using contextvars."""

from __future__ import annotations

import contextvars

from gatepass_access.kernel.errors import UnauthorizedError

_VAR: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "_principal_context", default=None
)


class PrincipalContext:
    """Store and retrieve the authenticated principal id via
    :mod:`contextvars` so each asyncio task has its own isolated context.

    The authentication layer sets it once the session token is verified;
    :func:`~gatepass_access.kernel.access.guard.require_feature` reads it.
    """

    @staticmethod
    def get_current() -> str | None:
        """Return the current principal id, or ``None`` if absent."""
        return _VAR.get()

    @staticmethod
    def set_current(principal_id: str) -> contextvars.Token[str | None]:
        """Set the current principal id and return a reset token."""
        return _VAR.set(principal_id)

    @staticmethod
    def reset(token: contextvars.Token[str | None]) -> None:
        _VAR.reset(token)

    @staticmethod
    def clear() -> None:
        """Remove the current principal from context."""
        _VAR.set(None)

    @staticmethod
    def require() -> str:
        """Return the current principal id or raise ``UnauthorizedError``."""
        principal_id = _VAR.get()
        if principal_id is None:
            raise UnauthorizedError("No authenticated principal in context")
        return principal_id


__all__ = ["PrincipalContext"]
