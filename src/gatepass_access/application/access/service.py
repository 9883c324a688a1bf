"""Application access – AccessService.

Request-handler facade over the permission engine.  One instance is built at
startup (see :func:`gatepass_access.bootstrap.create_access_service`) and
shared; handlers open :meth:`AccessService.request_scope` so every check in
a request sees the same resolved snapshot.
"""

from __future__ import annotations

import asyncio
import contextlib
from typing import AsyncIterator, Awaitable, Iterable, TypeVar

from gatepass_access.application.access.scope import RequestScopedResolver
from gatepass_access.kernel.access.catalog import FeatureCatalog
from gatepass_access.kernel.access.gate import AuthorizationGate
from gatepass_access.kernel.access.linkage import PrincipalLinkageProvider
from gatepass_access.kernel.access.pattern import FeaturePattern
from gatepass_access.kernel.access.records import GrantOwnerType
from gatepass_access.kernel.access.resolver import PermissionResolver
from gatepass_access.kernel.errors import InvalidPatternError, ResolutionError
from gatepass_access.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class AccessService:
    """Authorization queries for request handlers.

    Parameters
    ----------
    provider:
        Persistence port for links and grants.
    resolver:
        Resolver to wrap; defaults to a concurrent :class:`PermissionResolver`.
    timeout_seconds:
        Optional upper bound for one query.  Expiry raises
        :class:`ResolutionError`, never a partial answer.
    """

    def __init__(
        self,
        provider: PrincipalLinkageProvider,
        *,
        resolver: PermissionResolver | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        self._provider = provider
        self._resolver = RequestScopedResolver(resolver or PermissionResolver(provider))
        self._gate = AuthorizationGate(self._resolver)
        self._timeout = timeout_seconds

    @property
    def gate(self) -> AuthorizationGate:
        return self._gate

    @contextlib.asynccontextmanager
    async def request_scope(self) -> AsyncIterator["AccessService"]:
        async with self._resolver.scope():
            yield self

    async def _bounded(self, principal_id: str, aw: Awaitable[T]) -> T:
        if self._timeout is None:
            return await aw
        try:
            return await asyncio.wait_for(aw, timeout=self._timeout)
        except (asyncio.TimeoutError, TimeoutError) as exc:
            logger.error("resolution_timed_out", principal_id=principal_id, timeout=self._timeout)
            raise ResolutionError(
                principal_id,
                f"Permission lookup for {principal_id!r} timed out after {self._timeout}s",
                cause=exc,
            ) from exc

    async def _lookup(self, principal_id: str, aw: Awaitable[T]) -> T:
        try:
            return await self._bounded(principal_id, aw)
        except ResolutionError:
            raise
        except Exception as exc:
            raise ResolutionError(principal_id, cause=exc) from exc

    # ------------------------------------------------------------------
    # Authorization
    # ------------------------------------------------------------------

    async def check(self, principal_id: str, feature: str) -> bool:
        return await self._bounded(principal_id, self._gate.check(principal_id, feature))

    async def check_many(self, principal_id: str, features: Iterable[str]) -> dict[str, bool]:
        return await self._bounded(principal_id, self._gate.check_many(principal_id, features))

    async def list_allowed(self, principal_id: str) -> list[str]:
        return await self._bounded(principal_id, self._gate.list_allowed(principal_id))

    async def allowed_features(
        self, principal_id: str, *, catalog: FeatureCatalog | None = None
    ) -> list[str]:
        """Permission array returned at login and by the permission refresh hook.

        Raw stored patterns by default; pass *catalog* to get the concrete
        defined feature names they cover instead.
        """
        if catalog is None:
            return await self.list_allowed(principal_id)
        patterns = await self._bounded(principal_id, self._resolver.resolve(principal_id))
        return catalog.expand(patterns)

    # ------------------------------------------------------------------
    # Linkage lookups
    # ------------------------------------------------------------------

    async def user_groups(self, principal_id: str) -> list[str]:
        """Sorted ids of the live groups *principal_id* belongs to."""
        return sorted(set(await self._lookup(principal_id, self._provider.groups_of_user(principal_id))))

    async def user_roles(self, principal_id: str) -> list[str]:
        """Sorted ids of the live roles assigned to *principal_id* directly."""
        return sorted(set(await self._lookup(principal_id, self._provider.roles_of_user(principal_id))))

    async def owner_allows(self, owner_type: GrantOwnerType, owner_id: str, feature: str) -> bool:
        """Check *feature* against the grants owned by one user, role or group only.

        Memberships are not followed; malformed stored grants are ignored.
        """
        owner_type = GrantOwnerType(owner_type)
        raw = await self._lookup(owner_id, self._provider.grants_of(owner_type, owner_id))
        patterns: set[FeaturePattern] = set()
        for value in raw:
            try:
                patterns.add(FeaturePattern(value))
            except InvalidPatternError:
                logger.warning(
                    "malformed_grant_skipped",
                    owner_type=owner_type.value,
                    owner_id=owner_id,
                    pattern=value,
                )
        return AuthorizationGate.evaluate(patterns, feature)


__all__ = ["AccessService"]
