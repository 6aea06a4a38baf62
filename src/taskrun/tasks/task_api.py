# src/taskrun/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..config import DEFAULT_STRATEGY
from ..core.ports import EventSink
from ..runners import RUNNERS, BaseRunner
from .task_models import InputValidationError, RunResult, Task

logger = logging.getLogger(__name__)

# The two-task batch from the threads-vs-asyncio walkthrough: 3 + 2 units serially, 3 concurrently.
DEMO_BATCH: tuple[Task, ...] = (Task("Task 1", 3), Task("Task 2", 2))


def available_strategies() -> list[str]:
    return list(RUNNERS)


def get_runner(
    strategy: str = DEFAULT_STRATEGY,
    *,
    time_unit: float = 1.0,
    sink: EventSink | None = None,
) -> BaseRunner:
    """Build a runner by strategy name ("threads", "cooperative", "asyncio", "sequential")."""
    key = (strategy or "").strip().lower()
    cls = RUNNERS.get(key)
    if cls is None:
        raise ValueError(
            f"unknown strategy {strategy!r}; expected one of: {', '.join(available_strategies())}"
        )
    return cls(time_unit=time_unit, sink=sink)


def run_batch(
    tasks: Iterable[Task | tuple[str, float]],
    *,
    strategy: str = DEFAULT_STRATEGY,
    time_unit: float = 1.0,
    sink: EventSink | None = None,
) -> RunResult:
    """Convenience helper: build the runner and run one batch with it."""
    logger.debug("run_batch strategy=%s time_unit=%s", strategy, time_unit)
    return get_runner(strategy, time_unit=time_unit, sink=sink).run(tasks)


def parse_task_spec(raw: str) -> Task:
    """
    Parse the CLI form "NAME=DELAY".

    The split happens on the last "=", so names may contain "=" themselves.
    Range checks (negative delay, duplicates) are left to validate_batch().
    """
    name, sep, delay_raw = (raw or "").rpartition("=")
    name = name.strip()
    delay_raw = delay_raw.strip()
    if not sep or not name or not delay_raw:
        raise InputValidationError(f"expected NAME=DELAY, got {raw!r}")
    try:
        delay = float(delay_raw)
    except ValueError:
        raise InputValidationError(f"task {name!r}: delay is not a number: {delay_raw!r}") from None
    if delay.is_integer():
        delay = int(delay)
    return Task(name=name, delay=delay)


def parse_task_specs(raw_specs: Iterable[str]) -> list[Task]:
    return [parse_task_spec(s) for s in raw_specs]
