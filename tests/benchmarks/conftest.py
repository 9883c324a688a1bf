"""conftest.py for benchmarks.

Resolution benchmarks drive coroutines on one session-scoped event loop so
loop start-up cost stays out of the timings.
"""

from __future__ import annotations

import asyncio

import pytest


@pytest.fixture(scope="session")
def bench_loop():
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture(scope="session")
def run_async(bench_loop):
    """Run a coroutine to completion on the shared loop::

        def test_resolve(benchmark, run_async):
            benchmark(lambda: run_async(resolver.resolve("u1")))
    """

    def _run(coro):
        return bench_loop.run_until_complete(coro)

    return _run
