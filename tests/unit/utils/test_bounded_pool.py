"""Bounded fan-out tests for ``WorkerPool``."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pytest

from corpus_triage.utils.concurrency import WorkerPool

if TYPE_CHECKING:
    from collections.abc import Awaitable, Iterator


class _Tracker:
    def __init__(self) -> None:
        self.active = 0
        self.peak = 0

    async def job(self, value: int) -> int:
        self.active += 1
        self.peak = max(self.peak, self.active)
        try:
            await asyncio.sleep(0.001 * (value % 3))
            return value
        finally:
            self.active -= 1


async def test_pool_never_exceeds_its_limit() -> None:
    tracker = _Tracker()
    pool: WorkerPool[int] = WorkerPool(5)

    results = [item async for item in pool.run(tracker.job(index) for index in range(40))]

    assert sorted(results) == list(range(40))
    assert tracker.peak <= 5
    assert pool.peak == 5


async def test_pool_pulls_coroutines_lazily() -> None:
    tracker = _Tracker()
    pool: WorkerPool[int] = WorkerPool(3)
    received: list[int] = []
    outstanding_at_pull: list[int] = []

    def source() -> Iterator[Awaitable[int]]:
        for index in range(10):
            outstanding_at_pull.append(index - len(received))
            yield tracker.job(index)

    async for item in pool.run(source()):
        received.append(item)

    assert sorted(received) == list(range(10))
    assert len(outstanding_at_pull) == 10
    assert max(outstanding_at_pull) < 3


async def test_pool_handles_empty_input() -> None:
    pool: WorkerPool[int] = WorkerPool(2)

    assert [item async for item in pool.run([])] == []
    assert pool.peak == 0


async def test_pool_propagates_failure_and_cancels_the_rest() -> None:
    cancelled: list[int] = []

    async def job(index: int) -> int:
        if index == 0:
            raise RuntimeError("boom")
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            cancelled.append(index)
            raise
        return index

    pool: WorkerPool[int] = WorkerPool(4)
    with pytest.raises(RuntimeError, match="boom"):
        async for _ in pool.run(job(index) for index in range(4)):
            pass

    assert sorted(cancelled) == [1, 2, 3]


@pytest.mark.parametrize("limit", [0, -1])
def test_pool_rejects_non_positive_limit(limit: int) -> None:
    with pytest.raises(ValueError):
        WorkerPool(limit)
