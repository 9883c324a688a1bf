"""Kernel access – FeaturePattern.

A grant string is a dot-delimited sequence of segments such as
``gatePass.approve.read``.  A final ``*`` segment turns the pattern into a
prefix match::

    FeaturePattern("user.create.*").matches("user.create")          # True
    FeaturePattern("user.create.*").matches("user.create.read.own") # True
    FeaturePattern("user.create.*").matches("users.create.read")    # False

A ``*`` anywhere else is an ordinary literal segment.  Matching is exact and
case-sensitive; it never raises for a malformed requested feature, it simply
returns ``False``.
"""

from __future__ import annotations

import dataclasses
import functools
from typing import Any

from gatepass_access.kernel.errors import InvalidPatternError

SEPARATOR = "."
WILDCARD = "*"


def _split(value: str) -> tuple[str, ...] | None:
    """Return the segments of *value*, or ``None`` if it is malformed."""
    if not isinstance(value, str) or not value:
        return None
    segments = tuple(value.split(SEPARATOR))
    if any(s == "" for s in segments):
        return None
    return segments


def is_valid_feature_name(name: Any) -> bool:
    """``True`` if *name* is a non-empty string with no empty segments."""
    return _split(name) is not None


@functools.total_ordering
@dataclasses.dataclass(frozen=True, eq=True)
class FeaturePattern:
    """One stored grant string, parsed into segments."""

    raw: str
    segments: tuple[str, ...] = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.raw, str):
            raise InvalidPatternError(self.raw, "pattern must be a string")
        if not self.raw:
            raise InvalidPatternError(self.raw, "pattern is empty")
        segments = _split(self.raw)
        if segments is None:
            raise InvalidPatternError(self.raw, "pattern contains an empty segment")
        object.__setattr__(self, "segments", segments)

    @classmethod
    def parse(cls, raw: str) -> "FeaturePattern":
        return cls(raw)

    @property
    def is_wildcard(self) -> bool:
        """``True`` if the final segment is ``*``."""
        return self.segments[-1] == WILDCARD

    @property
    def prefix(self) -> tuple[str, ...]:
        """Segments that a requested feature must start with."""
        return self.segments[:-1] if self.is_wildcard else self.segments

    def matches(self, requested: str) -> bool:
        """Return ``True`` if this grant authorizes *requested*."""
        wanted = _split(requested)
        if wanted is None:
            return False
        last = len(self.segments) - 1
        for index, segment in enumerate(self.segments):
            if index == last and segment == WILDCARD:
                return True
            if index >= len(wanted) or segment != wanted[index]:
                return False
        return len(wanted) == len(self.segments)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FeaturePattern):
            return NotImplemented
        return self.raw < other.raw

    def __hash__(self) -> int:
        return hash(self.raw)

    def __str__(self) -> str:
        return self.raw


__all__ = ["FeaturePattern", "SEPARATOR", "WILDCARD", "is_valid_feature_name"]
