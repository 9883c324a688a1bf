"""Unit tests for AccessService."""

from __future__ import annotations

import asyncio

import pytest

from gatepass_access.application.access import AccessService
from gatepass_access.kernel.access import FeatureCatalog, GrantOwnerType, PermissionResolver
from gatepass_access.kernel.errors import ResolutionError
from gatepass_access.testing.fakes import InMemoryPrincipalLinkageProvider


def _provider(**kw) -> InMemoryPrincipalLinkageProvider:
    provider = InMemoryPrincipalLinkageProvider(**kw)
    provider.grant(GrantOwnerType.USER, "U", "item.read.*")
    provider.grant(GrantOwnerType.GROUP, "G", "customer.read.*")
    provider.grant(GrantOwnerType.ROLE, "R", "gatePass.approve.*")
    provider.grant(GrantOwnerType.ROLE, "R2", "stats.view.summary")
    provider.add_user_to_group("U", "G")
    provider.add_role_to_group("G", "R")
    provider.assign_role("U", "R2")
    return provider


class TestAuthorization:
    def test_check_and_check_many(self) -> None:
        service = AccessService(_provider())
        assert asyncio.run(service.check("U", "customer.read.list")) is True
        assert asyncio.run(service.check_many("U", ["stats.view.summary", "stats.view.all"])) == {
            "stats.view.summary": True,
            "stats.view.all": False,
        }

    def test_list_allowed(self) -> None:
        service = AccessService(_provider())
        assert asyncio.run(service.list_allowed("U")) == [
            "customer.read.*",
            "gatePass.approve.*",
            "item.read.*",
            "stats.view.summary",
        ]

    def test_custom_resolver(self) -> None:
        provider = _provider()
        service = AccessService(provider, resolver=PermissionResolver(provider, concurrent=False))
        assert asyncio.run(service.check("U", "item.read.detail")) is True


class TestAllowedFeatures:
    def test_raw_patterns_by_default(self) -> None:
        service = AccessService(_provider())
        result = asyncio.run(service.allowed_features("U"))
        assert "gatePass.approve.*" in result

    def test_expanded_against_catalog(self) -> None:
        catalog = FeatureCatalog(
            ["gatePass.approve.submit", "gatePass.approve.read", "gatePass.delete.any", "item.read.list"]
        )
        service = AccessService(_provider())
        assert asyncio.run(service.allowed_features("U", catalog=catalog)) == [
            "gatePass.approve.read",
            "gatePass.approve.submit",
            "item.read.list",
        ]


class TestLinkageLookups:
    def test_user_groups_and_roles(self) -> None:
        service = AccessService(_provider())
        assert asyncio.run(service.user_groups("U")) == ["G"]
        assert asyncio.run(service.user_roles("U")) == ["R2"]

    def test_deleted_links_hidden(self) -> None:
        provider = _provider()
        provider.remove_user_from_group("U", "G")
        provider.unassign_role("U", "R2")
        service = AccessService(provider)
        assert asyncio.run(service.user_groups("U")) == []
        assert asyncio.run(service.user_roles("U")) == []

    def test_lookup_failure_is_resolution_error(self) -> None:
        provider = _provider()
        provider.fail("groups_of_user")
        with pytest.raises(ResolutionError):
            asyncio.run(AccessService(provider).user_groups("U"))


class TestOwnerAllows:
    def test_role_own_grants(self) -> None:
        service = AccessService(_provider())
        assert asyncio.run(service.owner_allows(GrantOwnerType.ROLE, "R", "gatePass.approve.submit")) is True
        assert asyncio.run(service.owner_allows(GrantOwnerType.ROLE, "R", "item.read.detail")) is False

    def test_memberships_not_followed(self) -> None:
        service = AccessService(_provider())
        assert asyncio.run(service.owner_allows(GrantOwnerType.GROUP, "G", "gatePass.approve.submit")) is False

    def test_accepts_string_owner_type(self) -> None:
        service = AccessService(_provider())
        assert asyncio.run(service.owner_allows("User", "U", "item.read.one")) is True

    def test_malformed_grant_ignored(self) -> None:
        provider = _provider()
        provider.grant(GrantOwnerType.ROLE, "R", "gatePass..x")
        service = AccessService(provider)
        assert asyncio.run(service.owner_allows(GrantOwnerType.ROLE, "R", "gatePass.approve.x")) is True


class TestRequestScope:
    def test_resolves_once_per_scope(self) -> None:
        provider = _provider()
        service = AccessService(provider)

        async def run():
            async with service.request_scope():
                await service.check("U", "item.read.a")
                await service.check("U", "item.read.b")
                await service.list_allowed("U")

        asyncio.run(run())
        assert provider.calls["groups_of_user"] == 2  # user_group + group_role sources, once each

    def test_outside_scope_resolves_every_call(self) -> None:
        provider = _provider()
        service = AccessService(provider)

        async def run():
            await service.check("U", "item.read.a")
            await service.check("U", "item.read.b")

        asyncio.run(run())
        assert provider.calls["groups_of_user"] == 4


class TestTimeout:
    def test_slow_persistence_raises_resolution_error(self) -> None:
        service = AccessService(_provider(latency=0.5), timeout_seconds=0.01)
        with pytest.raises(ResolutionError) as info:
            asyncio.run(service.check("U", "item.read.a"))
        assert "timed out" in info.value.message

    def test_fast_enough_passes(self) -> None:
        service = AccessService(_provider(), timeout_seconds=5)
        assert asyncio.run(service.check("U", "item.read.a")) is True
