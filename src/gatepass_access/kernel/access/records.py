"""Kernel access – grant owner types and persisted record snapshots."""
from __future__ import annotations

import dataclasses
from enum import Enum


class GrantOwnerType(str, Enum):
    """Kind of entity that owns a grant record."""

    USER = "User"
    ROLE = "Role"
    GROUP = "Group"

    def __str__(self) -> str:
        return self.value


@dataclasses.dataclass(frozen=True)
class GrantRecord:
    """One stored grant: *pattern* owned by ``(owner_type, owner_id)``.

    Patterns are kept verbatim; parsing happens at resolution time so that a
    single malformed row can be skipped without losing the others.
    """

    owner_type: GrantOwnerType
    owner_id: str
    pattern: str
    deleted: bool = False

    @property
    def is_live(self) -> bool:
        return not self.deleted


@dataclasses.dataclass(frozen=True)
class FeatureDefinition:
    """A named capability, e.g. ``gatePass.approve.read``."""

    name: str
    description: str | None = None

    def __str__(self) -> str:
        return self.name


__all__ = ["FeatureDefinition", "GrantOwnerType", "GrantRecord"]
