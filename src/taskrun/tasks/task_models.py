# src/taskrun/tasks/task_models.py

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from numbers import Real


class TaskrunError(Exception):
    """Base class for everything taskrun raises on purpose."""


class InputValidationError(TaskrunError, ValueError):
    """A submitted batch is malformed (bad name, bad delay, duplicate name)."""


class TaskRunError(TaskrunError):
    """A worker failed while running a task; the original error is chained."""

    def __init__(self, task_name: str, cause: BaseException) -> None:
        super().__init__(f"task {task_name!r} failed: {cause!r}")
        self.task_name = task_name
        self.cause = cause


class EventKind(StrEnum):
    STARTED = "started"
    FINISHED = "finished"


@dataclass(slots=True, frozen=True)
class Task:
    """A named unit of simulated work. `delay` is measured in time units."""

    name: str
    delay: float


@dataclass(slots=True, frozen=True)
class TaskEvent:
    task_name: str
    kind: EventKind
    at: float  # seconds since the run began (monotonic)

    def __str__(self) -> str:
        return f"{self.task_name} {self.kind.value}"


@dataclass(slots=True, frozen=True)
class RunResult:
    """
    Batch-completion signal returned by every runner.

    `events` are kept in emission order. With the threaded strategy that order
    is whatever the scheduler produced; only start-before-finish per task holds.
    """

    strategy: str
    tasks: tuple[Task, ...]
    events: tuple[TaskEvent, ...]
    elapsed: float
    time_unit: float = 1.0

    @property
    def max_delay(self) -> float:
        return max((t.delay for t in self.tasks), default=0.0)

    @property
    def total_delay(self) -> float:
        return float(sum(t.delay for t in self.tasks))

    @property
    def elapsed_units(self) -> float:
        if self.time_unit <= 0:
            return 0.0
        return self.elapsed / self.time_unit

    def events_for(self, task_name: str) -> list[TaskEvent]:
        return [e for e in self.events if e.task_name == task_name]

    def finish_order(self) -> list[str]:
        return [e.task_name for e in self.events if e.kind == EventKind.FINISHED]

    def summary(self) -> str:
        return (
            f"All {len(self.tasks)} task(s) finished in {self.elapsed_units:.2f} time units "
            f"(sum of delays: {self.total_delay:g}, strategy: {self.strategy})"
        )


def _coerce(item: object, index: int) -> Task:
    if isinstance(item, Task):
        return item
    if isinstance(item, tuple) and len(item) == 2:
        return Task(name=item[0], delay=item[1])  # type: ignore[arg-type]
    raise InputValidationError(f"item #{index} is not a Task or (name, delay) pair: {item!r}")


def _check_delay(task: Task) -> None:
    delay = task.delay
    # bool is a Real subclass; True/False are not durations.
    if isinstance(delay, bool) or not isinstance(delay, Real):
        raise InputValidationError(f"task {task.name!r}: delay must be a number, got {delay!r}")
    if not math.isfinite(delay):
        raise InputValidationError(f"task {task.name!r}: delay must be finite, got {delay!r}")
    if delay < 0:
        raise InputValidationError(f"task {task.name!r}: delay must be >= 0, got {delay!r}")


def validate_batch(tasks: Iterable[Task | tuple[str, float]]) -> tuple[Task, ...]:
    """
    Coerce and validate a submitted batch.

    Fails fast on the first problem so that nothing in the batch starts:
    - every item must be a Task or a (name, delay) pair,
    - names must be non-empty strings, unique within the batch,
    - delays must be finite, non-negative real numbers.
    """
    if tasks is None:
        raise InputValidationError("batch must be an iterable of tasks, got None")

    out: list[Task] = []
    seen: set[str] = set()
    for index, item in enumerate(tasks):
        task = _coerce(item, index)

        if not isinstance(task.name, str) or not task.name.strip():
            raise InputValidationError(f"item #{index}: task name must be a non-empty string")
        if task.name in seen:
            raise InputValidationError(f"duplicate task name: {task.name!r}")
        _check_delay(task)

        seen.add(task.name)
        out.append(task)
    return tuple(out)
