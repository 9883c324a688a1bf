"""Kernel access – PermissionResolver.

Aggregates the four :class:`~gatepass_access.kernel.access.sources.GrantSource`
paths into one effective permission set::

    resolver = PermissionResolver(provider)
    patterns = await resolver.resolve("user-1")

The effective set is a plain union: there is no precedence between paths
and no deny grant.  Resolution reads current state on every call and keeps
nothing between calls; memoize per request with
:class:`~gatepass_access.application.access.scope.RequestScopedResolver`.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from gatepass_access.kernel.access.fanout import gather_all
from gatepass_access.kernel.access.linkage import PrincipalLinkageProvider
from gatepass_access.kernel.access.pattern import FeaturePattern
from gatepass_access.kernel.access.sources import GrantSource, default_grant_sources
from gatepass_access.kernel.errors import InvalidPatternError
from gatepass_access.observability.logging import get_logger

logger = get_logger(__name__)


class PermissionSource(Protocol):
    """Anything that can resolve a principal into its effective patterns."""

    async def resolve(self, principal_id: str) -> frozenset[FeaturePattern]: ...


class PermissionResolver:
    """Union the grant sources of a principal into a set of :class:`FeaturePattern`.

    Parameters
    ----------
    provider:
        Persistence port used to build the default four sources.
    sources:
        Explicit sources, replacing the defaults (mostly for tests).
    concurrent:
        Fetch the sources concurrently (default) or one after another.
    """

    def __init__(
        self,
        provider: PrincipalLinkageProvider,
        *,
        sources: Sequence[GrantSource] | None = None,
        concurrent: bool = True,
    ) -> None:
        self._sources: tuple[GrantSource, ...] = (
            tuple(sources) if sources is not None else default_grant_sources(provider)
        )
        self._concurrent = concurrent

    @property
    def sources(self) -> tuple[GrantSource, ...]:
        return self._sources

    async def resolve_raw(self, principal_id: str) -> frozenset[str]:
        """Union of the raw grant strings from every source.

        Raises :class:`ResolutionError` if any source fails.
        """
        if self._concurrent:
            batches = await gather_all(*(s.fetch(principal_id) for s in self._sources))
        else:
            batches = [await s.fetch(principal_id) for s in self._sources]
        return frozenset().union(*batches)

    async def resolve(self, principal_id: str) -> frozenset[FeaturePattern]:
        """Effective permission set of *principal_id*.

        Malformed stored patterns are logged and skipped; an empty set means
        the principal holds no grants.
        """
        raw = await self.resolve_raw(principal_id)
        patterns: set[FeaturePattern] = set()
        for value in sorted(raw, key=str):
            try:
                patterns.add(FeaturePattern(value))
            except InvalidPatternError as exc:
                logger.warning(
                    "malformed_grant_skipped",
                    principal_id=principal_id,
                    pattern=value,
                    reason=exc.reason,
                )
        logger.debug(
            "permissions_resolved",
            principal_id=principal_id,
            pattern_count=len(patterns),
            skipped=len(raw) - len(patterns),
        )
        return frozenset(patterns)


__all__ = ["PermissionResolver", "PermissionSource"]
