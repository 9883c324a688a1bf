"""Kernel access – all-or-nothing concurrent fan-out."""
from __future__ import annotations

import asyncio
from typing import Awaitable, TypeVar

T = TypeVar("T")


async def gather_all(*aws: Awaitable[T]) -> list[T]:
    """Await every awaitable concurrently and return results in input order.

    If any of them fails, or the caller is cancelled, the remaining ones are
    cancelled and awaited before the error propagates, so no partial result
    ever escapes.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


__all__ = ["gather_all"]
