"""Application access – RequestScopedResolver.

Resolution reads live state, so results may only be reused inside one
request.  Wrap the resolver once at startup and open a scope per request::

    scoped = RequestScopedResolver(PermissionResolver(provider))
    gate = AuthorizationGate(scoped)

    async with scoped.scope():
        await gate.check(user_id, "gatePass.approve.submit")
        await gate.check(user_id, "gatePass.read.list")   # no second resolution

Concurrent callers in the same scope share one in-flight resolution.  A
failed resolution is evicted, so a retry inside the scope queries again.
A caller that is cancelled or times out leaves the shared resolution running
for the others; once the last caller has left, the resolution is cancelled
and evicted.
"""

from __future__ import annotations

import asyncio
import contextlib
import contextvars
import dataclasses
from typing import AsyncIterator

from gatepass_access.kernel.access.pattern import FeaturePattern
from gatepass_access.kernel.access.resolver import PermissionSource


@dataclasses.dataclass
class _InFlight:
    future: "asyncio.Future[frozenset[FeaturePattern]]"
    waiters: int = 0


_Cache = dict[str, _InFlight]


class RequestScopedResolver:
    """Memoize :meth:`resolve` per principal for the lifetime of a scope."""

    def __init__(self, resolver: PermissionSource) -> None:
        self._resolver = resolver
        self._cache: contextvars.ContextVar[_Cache | None] = contextvars.ContextVar(
            f"_resolution_scope_{id(self)}", default=None
        )

    @property
    def in_scope(self) -> bool:
        return self._cache.get() is not None

    @contextlib.asynccontextmanager
    async def scope(self) -> AsyncIterator["RequestScopedResolver"]:
        if self._cache.get() is not None:
            yield self
            return
        token = self._cache.set({})
        try:
            yield self
        finally:
            self._cache.reset(token)

    async def resolve(self, principal_id: str) -> frozenset[FeaturePattern]:
        cache = self._cache.get()
        if cache is None:
            return await self._resolver.resolve(principal_id)

        entry = cache.get(principal_id)
        if entry is None:
            entry = _InFlight(asyncio.ensure_future(self._resolver.resolve(principal_id)))
            cache[principal_id] = entry

            def _evict_failed(fut: "asyncio.Future[frozenset[FeaturePattern]]") -> None:
                if fut.cancelled() or fut.exception() is not None:
                    if cache.get(principal_id) is entry:
                        del cache[principal_id]

            entry.future.add_done_callback(_evict_failed)

        entry.waiters += 1
        try:
            return await asyncio.shield(entry.future)
        finally:
            entry.waiters -= 1
            if entry.waiters == 0 and not entry.future.done():
                entry.future.cancel()


__all__ = ["RequestScopedResolver"]
