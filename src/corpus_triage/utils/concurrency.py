"""Bounded fan-out over an iterable of coroutines."""

from __future__ import annotations

import asyncio
import itertools
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Iterable

T = TypeVar("T")


class WorkerPool(Generic[T]):
    """Keep at most ``limit`` coroutines scheduled and yield results as they finish.

    The input is consumed lazily, only when a slot frees up, so a generator of
    coroutines is never materialized. ``peak`` records the most coroutines
    ever scheduled at once. An exception from any coroutine cancels the rest
    and propagates to the consumer.
    """

    def __init__(self, limit: int) -> None:
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        self.limit = limit
        self.peak = 0

    async def run(self, coroutines: Iterable[Awaitable[T]]) -> AsyncIterator[T]:
        source = iter(coroutines)
        pending: set[asyncio.Future[T]] = set()
        try:
            while True:
                for coroutine in itertools.islice(source, self.limit - len(pending)):
                    pending.add(asyncio.ensure_future(coroutine))
                self.peak = max(self.peak, len(pending))
                if not pending:
                    return
                done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
                for task in done:
                    yield task.result()
        finally:
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)


__all__ = ["WorkerPool"]
