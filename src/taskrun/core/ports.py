# src/taskrun/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the runners.

Runners depend on these Protocols instead of concrete sinks/clocks,
which keeps output targets swappable and makes timing testable.
"""

from typing import Protocol

from ..tasks.task_models import TaskEvent


class EventSink(Protocol):
    """
    Receives every TaskEvent a runner emits.

    Runners serialise calls, so an implementation never sees two emit() calls at once,
    but with the threaded strategy the calling thread varies.
    """

    def emit(self, event: TaskEvent) -> None: ...


class Clock(Protocol):
    """Monotonic seconds (time.monotonic-compatible)."""

    def __call__(self) -> float: ...

