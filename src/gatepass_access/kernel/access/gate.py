"""Kernel access – AuthorizationGate.

Answers "may this principal invoke feature X?" against a resolved set of
:class:`FeaturePattern`.  Denial is a plain ``False``; the gate raises only
when resolution itself failed (:class:`ResolutionError`), which callers must
treat as denied.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable

from gatepass_access.kernel.access.pattern import FeaturePattern, is_valid_feature_name
from gatepass_access.kernel.access.resolver import PermissionSource
from gatepass_access.observability.logging import get_logger

logger = get_logger(__name__)


class AuthorizationGate:
    """Single and batch authorization checks for a principal."""

    def __init__(self, resolver: PermissionSource) -> None:
        self._resolver = resolver

    @staticmethod
    def evaluate(patterns: AbstractSet[FeaturePattern], feature: str) -> bool:
        """``True`` if any pattern in *patterns* matches *feature*."""
        if not is_valid_feature_name(feature):
            return False
        return any(p.matches(feature) for p in patterns)

    @classmethod
    def evaluate_many(
        cls, patterns: AbstractSet[FeaturePattern], features: Iterable[str]
    ) -> dict[str, bool]:
        return {feature: cls.evaluate(patterns, feature) for feature in features}

    async def check(self, principal_id: str, feature: str) -> bool:
        patterns = await self._resolver.resolve(principal_id)
        allowed = self.evaluate(patterns, feature)
        logger.debug(
            "authorization_decision",
            principal_id=principal_id,
            feature=feature,
            allowed=allowed,
        )
        return allowed

    async def check_many(self, principal_id: str, features: Iterable[str]) -> dict[str, bool]:
        """Check every feature against one resolved snapshot."""
        requested = list(features)
        patterns = await self._resolver.resolve(principal_id)
        decisions = self.evaluate_many(patterns, requested)
        logger.debug(
            "authorization_decision",
            principal_id=principal_id,
            features=requested,
            allowed=sorted(f for f, ok in decisions.items() if ok),
        )
        return decisions

    async def list_allowed(self, principal_id: str) -> list[str]:
        """Sorted raw pattern strings held by *principal_id*, wildcards included."""
        patterns = await self._resolver.resolve(principal_id)
        return sorted(p.raw for p in patterns)


__all__ = ["AuthorizationGate"]
