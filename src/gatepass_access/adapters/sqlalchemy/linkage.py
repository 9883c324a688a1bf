"""SQLAlchemy adapter – SqlAlchemyPrincipalLinkageProvider.

Each lookup opens its own session: the resolver fans the four grant paths
out concurrently and an :class:`AsyncSession` must not be shared between
concurrent operations.
"""
from __future__ import annotations

from typing import Any, Callable

from sqlalchemy import select

from gatepass_access.adapters.sqlalchemy.models import (
    FeatureModel,
    GrantRecordModel,
    GroupModel,
    GroupRoleModel,
    RoleModel,
    UserGroupModel,
    UserRoleModel,
)
from gatepass_access.kernel.access.catalog import FeatureCatalog
from gatepass_access.kernel.access.records import GrantOwnerType


class SqlAlchemyPrincipalLinkageProvider:
    """:class:`PrincipalLinkageProvider` backed by the access tables."""

    def __init__(self, session_factory: Callable[[], Any]) -> None:
        self._session_factory = session_factory

    async def _scalars(self, stmt: Any) -> list[str]:
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def grants_of(self, owner_type: GrantOwnerType, owner_id: str) -> list[str]:
        stmt = select(GrantRecordModel.pattern).where(
            GrantRecordModel.parent_type == GrantOwnerType(owner_type),
            GrantRecordModel.parent_id == owner_id,
            GrantRecordModel.not_deleted_filter(),
        )
        return await self._scalars(stmt)

    async def groups_of_user(self, user_id: str) -> list[str]:
        stmt = (
            select(GroupModel.id)
            .join(UserGroupModel, UserGroupModel.group_id == GroupModel.id)
            .where(
                UserGroupModel.user_id == user_id,
                UserGroupModel.not_deleted_filter(),
                GroupModel.not_deleted_filter(),
            )
            .distinct()
        )
        return await self._scalars(stmt)

    async def roles_of_user(self, user_id: str) -> list[str]:
        stmt = (
            select(RoleModel.id)
            .join(UserRoleModel, UserRoleModel.role_id == RoleModel.id)
            .where(
                UserRoleModel.user_id == user_id,
                UserRoleModel.not_deleted_filter(),
                RoleModel.not_deleted_filter(),
            )
            .distinct()
        )
        return await self._scalars(stmt)

    async def roles_of_group(self, group_id: str) -> list[str]:
        stmt = (
            select(RoleModel.id)
            .join(GroupRoleModel, GroupRoleModel.role_id == RoleModel.id)
            .where(
                GroupRoleModel.group_id == group_id,
                GroupRoleModel.not_deleted_filter(),
                RoleModel.not_deleted_filter(),
            )
            .distinct()
        )
        return await self._scalars(stmt)


async def load_feature_catalog(session_factory: Callable[[], Any]) -> FeatureCatalog:
    """Build a :class:`FeatureCatalog` from the live ``features`` rows."""
    async with session_factory() as session:
        result = await session.execute(
            select(FeatureModel.name).where(FeatureModel.not_deleted_filter())
        )
        return FeatureCatalog(result.scalars().all())


__all__ = ["SqlAlchemyPrincipalLinkageProvider", "load_feature_catalog"]
