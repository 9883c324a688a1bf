"""Kernel access – GrantSource and its four implementations.

Each source answers one question: "which raw grant strings reach this
principal through *my* path?"  The four paths are

* :class:`UserDirectGrantSource`: grants owned by the user,
* :class:`UserGroupGrantSource`: grants owned by the user's groups,
* :class:`UserRoleGrantSource`: grants owned by roles assigned to the user,
* :class:`GroupRoleGrantSource`: grants owned by roles held by the user's groups.

Provider failures are wrapped in :class:`ResolutionError`; an empty result
is a legitimate answer, never an error.
"""

from __future__ import annotations

import abc
from typing import Iterable

from gatepass_access.kernel.access.fanout import gather_all
from gatepass_access.kernel.access.linkage import PrincipalLinkageProvider
from gatepass_access.kernel.access.records import GrantOwnerType
from gatepass_access.kernel.errors import ResolutionError
from gatepass_access.observability.logging import get_logger

logger = get_logger(__name__)


class GrantSource(abc.ABC):
    """One origin of grants for a principal."""

    name: str = "grant_source"

    def __init__(self, provider: PrincipalLinkageProvider) -> None:
        self._provider = provider

    async def fetch(self, principal_id: str) -> frozenset[str]:
        """Return the raw patterns this source grants to *principal_id*."""
        try:
            return frozenset(await self._fetch(principal_id))
        except ResolutionError:
            raise
        except Exception as exc:
            logger.error(
                "grant_source_failed",
                source=self.name,
                principal_id=principal_id,
                error=repr(exc),
            )
            raise ResolutionError(
                principal_id,
                f"Grant source {self.name!r} failed for principal {principal_id!r}",
                source=self.name,
                cause=exc,
            ) from exc

    @abc.abstractmethod
    async def _fetch(self, principal_id: str) -> Iterable[str]: ...

    async def _grants_of_all(self, owner_type: GrantOwnerType, owner_ids: Iterable[str]) -> set[str]:
        ids = sorted(set(owner_ids))
        if not ids:
            return set()
        batches = await gather_all(
            *(self._provider.grants_of(owner_type, owner_id) for owner_id in ids)
        )
        return {pattern for batch in batches for pattern in batch}

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class UserDirectGrantSource(GrantSource):
    name = "user_direct"

    async def _fetch(self, principal_id: str) -> Iterable[str]:
        return await self._provider.grants_of(GrantOwnerType.USER, principal_id)


class UserGroupGrantSource(GrantSource):
    name = "user_group"

    async def _fetch(self, principal_id: str) -> Iterable[str]:
        group_ids = await self._provider.groups_of_user(principal_id)
        return await self._grants_of_all(GrantOwnerType.GROUP, group_ids)


class UserRoleGrantSource(GrantSource):
    name = "user_role"

    async def _fetch(self, principal_id: str) -> Iterable[str]:
        role_ids = await self._provider.roles_of_user(principal_id)
        return await self._grants_of_all(GrantOwnerType.ROLE, role_ids)


class GroupRoleGrantSource(GrantSource):
    name = "group_role"

    async def _fetch(self, principal_id: str) -> Iterable[str]:
        group_ids = sorted(set(await self._provider.groups_of_user(principal_id)))
        if not group_ids:
            return set()
        role_lists = await gather_all(
            *(self._provider.roles_of_group(group_id) for group_id in group_ids)
        )
        role_ids = {role_id for roles in role_lists for role_id in roles}
        return await self._grants_of_all(GrantOwnerType.ROLE, role_ids)


def default_grant_sources(provider: PrincipalLinkageProvider) -> tuple[GrantSource, ...]:
    """The four grant paths, in canonical order."""
    return (
        UserDirectGrantSource(provider),
        UserGroupGrantSource(provider),
        UserRoleGrantSource(provider),
        GroupRoleGrantSource(provider),
    )


__all__ = [
    "GrantSource",
    "GroupRoleGrantSource",
    "UserDirectGrantSource",
    "UserGroupGrantSource",
    "UserRoleGrantSource",
    "default_grant_sources",
]
