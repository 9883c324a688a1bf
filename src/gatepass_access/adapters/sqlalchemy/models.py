"""SQLAlchemy adapter – ORM models for users, roles, groups, links and grants.

Every table carries ``deleted_at`` (:class:`SoftDeleteMixin`).  Links are
separate rows so each membership can be soft-deleted on its own, without
touching the user, group or role it connects.
"""
from __future__ import annotations

import uuid

from sqlalchemy import Enum, ForeignKey, Index, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from gatepass_access.adapters.sqlalchemy.mixins import SoftDeleteMixin, TimestampMixin
from gatepass_access.kernel.access.records import GrantOwnerType


def _uuid() -> str:
    return str(uuid.uuid4())


class AccessBase(DeclarativeBase):
    pass


class UserModel(SoftDeleteMixin, TimestampMixin, AccessBase):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    username: Mapped[str] = mapped_column(String(150), unique=True)


class RoleModel(SoftDeleteMixin, TimestampMixin, AccessBase):
    __tablename__ = "roles"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    name: Mapped[str] = mapped_column(String(150), unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)


class GroupModel(SoftDeleteMixin, TimestampMixin, AccessBase):
    __tablename__ = "groups"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    name: Mapped[str] = mapped_column(String(150), unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)


class FeatureModel(SoftDeleteMixin, TimestampMixin, AccessBase):
    """A defined feature name (the catalog of grantable strings)."""

    __tablename__ = "features"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    name: Mapped[str] = mapped_column(String(255), unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)


class GrantRecordModel(SoftDeleteMixin, TimestampMixin, AccessBase):
    """One stored grant pattern owned by a user, role or group."""

    __tablename__ = "feature_permissions"
    __table_args__ = (Index("ix_feature_permissions_owner", "parent_type", "parent_id"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    parent_type: Mapped[GrantOwnerType] = mapped_column(
        Enum(
            GrantOwnerType,
            name="grant_owner_type",
            native_enum=False,
            length=16,
            values_callable=lambda e: [m.value for m in e],
        )
    )
    parent_id: Mapped[str] = mapped_column(String(36))
    pattern: Mapped[str] = mapped_column(String(255))


class UserRoleModel(SoftDeleteMixin, TimestampMixin, AccessBase):
    __tablename__ = "user_roles"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True)
    role_id: Mapped[str] = mapped_column(ForeignKey("roles.id"), index=True)


class UserGroupModel(SoftDeleteMixin, TimestampMixin, AccessBase):
    __tablename__ = "user_groups"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True)
    group_id: Mapped[str] = mapped_column(ForeignKey("groups.id"), index=True)


class GroupRoleModel(SoftDeleteMixin, TimestampMixin, AccessBase):
    __tablename__ = "group_roles"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    group_id: Mapped[str] = mapped_column(ForeignKey("groups.id"), index=True)
    role_id: Mapped[str] = mapped_column(ForeignKey("roles.id"), index=True)


__all__ = [
    "AccessBase",
    "FeatureModel",
    "GrantRecordModel",
    "GroupModel",
    "GroupRoleModel",
    "RoleModel",
    "UserGroupModel",
    "UserModel",
    "UserRoleModel",
]
