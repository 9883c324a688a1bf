"""Kernel access – feature patterns, grant sources, resolution and authorization."""
from gatepass_access.kernel.access.catalog import FeatureCatalog
from gatepass_access.kernel.access.context import PrincipalContext
from gatepass_access.kernel.access.gate import AuthorizationGate
from gatepass_access.kernel.access.guard import require_feature
from gatepass_access.kernel.access.linkage import PrincipalLinkageProvider
from gatepass_access.kernel.access.pattern import FeaturePattern, is_valid_feature_name
from gatepass_access.kernel.access.records import FeatureDefinition, GrantOwnerType, GrantRecord
from gatepass_access.kernel.access.resolver import PermissionResolver, PermissionSource
from gatepass_access.kernel.access.sources import (
    GrantSource,
    GroupRoleGrantSource,
    UserDirectGrantSource,
    UserGroupGrantSource,
    UserRoleGrantSource,
    default_grant_sources,
)

__all__ = [
    "AuthorizationGate",
    "FeatureCatalog",
    "FeatureDefinition",
    "FeaturePattern",
    "GrantOwnerType",
    "GrantRecord",
    "GrantSource",
    "GroupRoleGrantSource",
    "PermissionResolver",
    "PermissionSource",
    "PrincipalContext",
    "PrincipalLinkageProvider",
    "UserDirectGrantSource",
    "UserGroupGrantSource",
    "UserRoleGrantSource",
    "default_grant_sources",
    "is_valid_feature_name",
    "require_feature",
]
