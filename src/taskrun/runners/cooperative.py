# src/taskrun/runners/cooperative.py

"""
Cooperative single-worker strategy.

A tiny event loop in the spirit of asyncio.BaseEventLoop: coroutines give up
control by awaiting a Suspend command, which travels up the await chain to
the loop as a plain yielded object. The loop parks the coroutine until the
requested wake-up time and runs something else meanwhile. Only when nothing
is ready does the loop actually sleep the thread.
"""

from __future__ import annotations

import heapq
import logging
import time
from collections import deque
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from typing import Any

from ..core.ports import Clock
from ..tasks.task_models import Task, TaskRunError
from .base import BaseRunner, EventRecorder

logger = logging.getLogger(__name__)


class Suspend:
    """
    Command object: "park me until `until`".

    Awaiting it yields the object itself to whoever drives the coroutine.
    Whatever the loop sends back in becomes the value of the await.
    """

    __slots__ = ("until",)

    def __init__(self, until: float) -> None:
        self.until = until

    def __await__(self):
        resumed_at = yield self
        return resumed_at

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(until={self.until:.3f})"


@dataclass(order=True, slots=True)
class _Parked:
    # seq breaks ties between equal wake-up times; coroutines are not comparable.
    wake_at: float
    seq: int
    name: str = field(compare=False)
    coro: Coroutine[Any, Any, Any] = field(compare=False)


class SleepingLoop:
    """
    Drives coroutines that only ever await Suspend.

    Ready coroutines run in FIFO order; parked ones sit in a heap keyed by
    wake-up time. A coroutine that raises aborts the loop: the remaining
    coroutines are closed and a TaskRunError is raised.
    """

    def __init__(self, *, clock: Clock = time.monotonic, sleep: Callable[[float], None] = time.sleep) -> None:
        self.clock = clock
        self._sleep = sleep
        self._ready: deque[tuple[str, Coroutine[Any, Any, Any], Any]] = deque()
        self._parked: list[_Parked] = []
        self._seq = 0

    async def suspend(self, seconds: float) -> float:
        """Yield control for `seconds`; returns how long the caller was actually parked."""
        before = self.clock()
        resumed_at = await Suspend(before + max(0.0, seconds))
        return resumed_at - before

    def spawn(self, coro: Coroutine[Any, Any, Any], *, name: str) -> None:
        self._ready.append((name, coro, None))

    @property
    def pending(self) -> int:
        return len(self._ready) + len(self._parked)

    def run_until_complete(self) -> None:
        while self._ready or self._parked:
            if not self._ready:
                self._wake_next()

            name, coro, value = self._ready.popleft()
            try:
                command = coro.send(value)
            except StopIteration:
                continue
            except Exception as exc:
                logger.exception("coroutine failed name=%s", name)
                self._close_all()
                raise TaskRunError(name, exc) from exc

            if not isinstance(command, Suspend):
                coro.close()
                self._close_all()
                exc = TypeError(f"unsupported await target {command!r}; only Suspend is understood")
                raise TaskRunError(name, exc) from exc

            self._seq += 1
            heapq.heappush(self._parked, _Parked(command.until, self._seq, name, coro))

    def _wake_next(self) -> None:
        parked = heapq.heappop(self._parked)
        delta = parked.wake_at - self.clock()
        if delta > 0:
            # Nothing else is ready, so blocking the only worker is fine.
            try:
                self._sleep(delta)
            except Exception as exc:
                logger.exception("sleep failed while parking name=%s", parked.name)
                parked.coro.close()
                self._close_all()
                raise TaskRunError(parked.name, exc) from exc
            except BaseException:
                parked.coro.close()
                self._close_all()
                raise
        now = self.clock()
        self._ready.append((parked.name, parked.coro, now))

        # Everything else that is due by now goes in the same batch.
        while self._parked and self._parked[0].wake_at <= now:
            other = heapq.heappop(self._parked)
            self._ready.append((other.name, other.coro, now))

    def _close_all(self) -> None:
        for _, coro, _ in self._ready:
            coro.close()
        for parked in self._parked:
            parked.coro.close()
        self._ready.clear()
        self._parked.clear()


class CooperativeRunner(BaseRunner):
    strategy = "cooperative"

    def __init__(self, *, sleep: Callable[[float], None] = time.sleep, **kwargs) -> None:
        super().__init__(**kwargs)
        self._sleep = sleep

    def _execute(self, batch: tuple[Task, ...], recorder: EventRecorder) -> None:
        loop = SleepingLoop(clock=self.clock, sleep=self._sleep)

        async def _one(task: Task) -> None:
            recorder.started(task)
            await loop.suspend(self.seconds(task))
            recorder.finished(task)

        for task in batch:
            loop.spawn(_one(task), name=task.name)
        loop.run_until_complete()
