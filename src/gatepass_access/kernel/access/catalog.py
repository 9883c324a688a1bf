"""Kernel access – FeatureCatalog.

The catalog is the universe of defined feature names.  It is only needed
when a caller wants concrete names instead of the raw stored patterns;
:meth:`AuthorizationGate.list_allowed` never expands.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable

from gatepass_access.kernel.access.pattern import FeaturePattern, is_valid_feature_name
from gatepass_access.kernel.access.records import FeatureDefinition
from gatepass_access.kernel.errors import InvalidPatternError


class FeatureCatalog:
    """Immutable set of defined feature names."""

    def __init__(self, features: Iterable[str | FeatureDefinition] = ()) -> None:
        names: set[str] = set()
        for feature in features:
            name = feature.name if isinstance(feature, FeatureDefinition) else feature
            if not is_valid_feature_name(name):
                raise InvalidPatternError(name, "feature name is not a dot-delimited identifier")
            names.add(name)
        self._names = frozenset(names)

    @property
    def names(self) -> frozenset[str]:
        return self._names

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def expand(self, patterns: AbstractSet[FeaturePattern]) -> list[str]:
        """Sorted catalog names matched by at least one of *patterns*."""
        return sorted(n for n in self._names if any(p.matches(n) for p in patterns))

    def undefined(self, patterns: AbstractSet[FeaturePattern]) -> list[str]:
        """Raw patterns that match no catalog entry."""
        return sorted(
            p.raw for p in patterns if not any(p.matches(n) for n in self._names)
        )


__all__ = ["FeatureCatalog"]
