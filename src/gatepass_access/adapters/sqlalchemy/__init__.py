"""SQLAlchemy adapter – access models, session factory, linkage provider."""
from gatepass_access.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from gatepass_access.adapters.sqlalchemy.linkage import (
    SqlAlchemyPrincipalLinkageProvider,
    load_feature_catalog,
)
from gatepass_access.adapters.sqlalchemy.mixins import SoftDeleteMixin, TimestampMixin
from gatepass_access.adapters.sqlalchemy.models import (
    AccessBase,
    FeatureModel,
    GrantRecordModel,
    GroupModel,
    GroupRoleModel,
    RoleModel,
    UserGroupModel,
    UserModel,
    UserRoleModel,
)

__all__ = [
    "AccessBase",
    "FeatureModel",
    "GrantRecordModel",
    "GroupModel",
    "GroupRoleModel",
    "RoleModel",
    "SoftDeleteMixin",
    "SqlAlchemyPrincipalLinkageProvider",
    "SqlAlchemySessionFactory",
    "TimestampMixin",
    "UserGroupModel",
    "UserModel",
    "UserRoleModel",
    "load_feature_catalog",
]
