# src/taskrun/runners/base.py

"""
Shared runner plumbing.

Every strategy follows the same outline:
- validate the whole batch up front (nothing starts on bad input),
- execute the batch with its own concurrency mechanism,
- record events through one EventRecorder,
- return a RunResult once every task has finished.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Iterable

from ..core.ports import Clock, EventSink
from ..tasks.task_models import EventKind, InputValidationError, RunResult, Task, TaskEvent, validate_batch

logger = logging.getLogger(__name__)


class EventRecorder:
    """
    Collects events for one run and forwards them to an optional sink.

    The lock makes recording + forwarding atomic, so the recorded order
    matches the order the sink saw.
    """

    def __init__(self, *, clock: Clock, sink: EventSink | None = None) -> None:
        self._clock = clock
        self._sink = sink
        self._lock = threading.Lock()
        self._events: list[TaskEvent] = []
        self._t0 = clock()

    def elapsed(self) -> float:
        return self._clock() - self._t0

    def record(self, task: Task, kind: EventKind) -> TaskEvent:
        with self._lock:
            event = TaskEvent(task_name=task.name, kind=kind, at=self._clock() - self._t0)
            self._events.append(event)
            logger.debug("%s at %.3fs", event, event.at)
            if self._sink is not None:
                self._sink.emit(event)
        return event

    def started(self, task: Task) -> TaskEvent:
        return self.record(task, EventKind.STARTED)

    def finished(self, task: Task) -> TaskEvent:
        return self.record(task, EventKind.FINISHED)

    def snapshot(self) -> tuple[TaskEvent, ...]:
        with self._lock:
            return tuple(self._events)


class BaseRunner:
    """Template for the concrete strategies; subclasses implement _execute()."""

    strategy = "base"

    def __init__(
        self,
        *,
        time_unit: float = 1.0,
        sink: EventSink | None = None,
        clock: Clock = time.monotonic,
    ) -> None:
        if time_unit < 0:
            raise ValueError(f"time_unit must be >= 0, got {time_unit!r}")
        self.time_unit = float(time_unit)
        self.sink = sink
        self.clock = clock

    def seconds(self, task: Task) -> float:
        return float(task.delay) * self.time_unit

    def validate(self, tasks: Iterable[Task | tuple[str, float]]) -> tuple[Task, ...]:
        """validate_batch() plus a ceiling: every delay must be sleepable with this time unit."""
        batch = validate_batch(tasks)
        for task in batch:
            if self.seconds(task) > threading.TIMEOUT_MAX:
                raise InputValidationError(
                    f"task {task.name!r}: delay {task.delay!r} exceeds the longest supported wait "
                    f"({threading.TIMEOUT_MAX:.0f}s at time_unit={self.time_unit}s)"
                )
        return batch

    def run(self, tasks: Iterable[Task | tuple[str, float]]) -> RunResult:
        batch = self.validate(tasks)
        recorder = self._start(batch)
        self._execute(batch, recorder)
        return self._finish(batch, recorder)

    def _start(self, batch: tuple[Task, ...]) -> EventRecorder:
        logger.info(
            "Running %d task(s) strategy=%s time_unit=%ss",
            len(batch),
            self.strategy,
            self.time_unit,
        )
        return EventRecorder(clock=self.clock, sink=self.sink)

    def _finish(self, batch: tuple[Task, ...], recorder: EventRecorder) -> RunResult:
        result = RunResult(
            strategy=self.strategy,
            tasks=batch,
            events=recorder.snapshot(),
            elapsed=recorder.elapsed(),
            time_unit=self.time_unit,
        )
        logger.info("Batch done strategy=%s elapsed=%.3fs", self.strategy, result.elapsed)
        return result

    def _execute(self, batch: tuple[Task, ...], recorder: EventRecorder) -> None:
        raise NotImplementedError
