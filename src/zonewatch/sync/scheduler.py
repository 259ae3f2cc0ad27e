"""Periodic and one-shot refresh scheduling."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

_logger = logging.getLogger(__name__)

RefreshTarget = Callable[[], Awaitable[Any]]


class RefreshScheduler:
    """Drive refresh targets on a fixed period.

    Every tick starts each target as its own task; targets are never
    sequenced against each other and a tick never waits for the previous
    one. :meth:`start` fires a tick immediately, then one per period.
    :meth:`schedule_once` adds an out-of-band tick after a delay.
    """

    def __init__(self, targets: Sequence[RefreshTarget], *, period: float) -> None:
        self._targets = tuple(targets)
        self._period = period
        self._periodic_task: asyncio.Task[None] | None = None
        self._delayed: set[asyncio.Task[None]] = set()
        self._inflight: set[asyncio.Task[None]] = set()
        self.tick_count = 0

    @property
    def is_running(self) -> bool:
        return self._periodic_task is not None and not self._periodic_task.done()

    @property
    def inflight(self) -> int:
        return len(self._inflight)

    def start(self) -> None:
        if self.is_running:
            return
        self.tick()
        self._periodic_task = asyncio.get_running_loop().create_task(self._periodic())

    def tick(self) -> list[asyncio.Task[None]]:
        """Start every target now."""
        self.tick_count += 1
        return [self._spawn(target) for target in self._targets]

    def schedule_once(self, delay: float) -> asyncio.Task[None]:
        """Run one extra tick after *delay* seconds."""
        task = asyncio.get_running_loop().create_task(self._tick_after(delay))
        self._delayed.add(task)
        task.add_done_callback(self._delayed.discard)
        return task

    async def drain(self) -> None:
        """Wait until no refresh started so far is still running."""
        while self._inflight:
            await asyncio.gather(*list(self._inflight), return_exceptions=True)

    async def stop(self) -> None:
        """Cancel the timer, pending one-shots and in-flight refreshes."""
        pending: list[asyncio.Task[None]] = []
        if self._periodic_task is not None:
            pending.append(self._periodic_task)
            self._periodic_task = None
        pending.extend(self._delayed)
        pending.extend(self._inflight)
        for task in pending:
            task.cancel()
        for task in pending:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    def _spawn(self, target: RefreshTarget) -> asyncio.Task[None]:
        task = asyncio.get_running_loop().create_task(self._run(target))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)
        return task

    @staticmethod
    async def _run(target: RefreshTarget) -> None:
        try:
            await target()
        except Exception:
            _logger.exception("Refresh target %r failed", target)

    async def _periodic(self) -> None:
        while True:
            await asyncio.sleep(self._period)
            self.tick()

    async def _tick_after(self, delay: float) -> None:
        await asyncio.sleep(delay)
        self.tick()
