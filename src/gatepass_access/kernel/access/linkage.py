"""Kernel access – PrincipalLinkageProvider port."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from gatepass_access.kernel.access.records import GrantOwnerType


@runtime_checkable
class PrincipalLinkageProvider(Protocol):
    """Port: read-only persistence lookups used by permission resolution.

    Every method returns only live rows.  A soft-deleted link is excluded even
    when both of its endpoints are live, and a live link pointing at a
    soft-deleted group or role is excluded too.  Implementations raise on
    infrastructure failure; an empty list always means "nothing found".
    """

    async def grants_of(self, owner_type: GrantOwnerType, owner_id: str) -> list[str]:
        """Raw patterns of the live grant records owned by one entity."""
        ...

    async def groups_of_user(self, user_id: str) -> list[str]:
        """Ids of the live groups *user_id* belongs to."""
        ...

    async def roles_of_user(self, user_id: str) -> list[str]:
        """Ids of the live roles assigned to *user_id* directly."""
        ...

    async def roles_of_group(self, group_id: str) -> list[str]:
        """Ids of the live roles held by *group_id*."""
        ...


__all__ = ["PrincipalLinkageProvider"]
