"""Wiring from :class:`AccessSettings` to a ready :class:`AccessService`."""
from __future__ import annotations

import dataclasses

from gatepass_access.adapters.sqlalchemy import (
    SqlAlchemyPrincipalLinkageProvider,
    SqlAlchemySessionFactory,
)
from gatepass_access.application.access import AccessService
from gatepass_access.config import AccessSettings, EnvSettingsLoader, SettingsFactory
from gatepass_access.kernel.access import PermissionResolver
from gatepass_access.observability.logging import JsonLoggerFactory, get_logger

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class AccessRuntime:
    """Objects built at startup; dispose :attr:`sessions` on shutdown."""

    settings: AccessSettings
    sessions: SqlAlchemySessionFactory
    service: AccessService


def load_settings(**overrides: object) -> AccessSettings:
    """Read ``ACCESS_*`` environment variables, then apply *overrides*."""
    return SettingsFactory.create(AccessSettings, [EnvSettingsLoader()], overrides or None)


def create_access_service(settings: AccessSettings, *, configure_logging: bool = True) -> AccessRuntime:
    if configure_logging:
        JsonLoggerFactory.configure(settings.log_level, json=settings.log_json)

    sessions = SqlAlchemySessionFactory(settings.database_url, echo=settings.echo_sql)
    provider = SqlAlchemyPrincipalLinkageProvider(sessions)
    resolver = PermissionResolver(provider, concurrent=settings.concurrent_fetch)
    service = AccessService(
        provider,
        resolver=resolver,
        timeout_seconds=settings.resolve_timeout_seconds,
    )
    logger.info(
        "access_service_ready",
        concurrent_fetch=settings.concurrent_fetch,
        resolve_timeout_seconds=settings.resolve_timeout_seconds,
    )
    return AccessRuntime(settings=settings, sessions=sessions, service=service)


__all__ = ["AccessRuntime", "create_access_service", "load_settings"]
