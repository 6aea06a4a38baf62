"""
Execution strategies.

Components:
- base.py: EventRecorder + BaseRunner (validation, recording, RunResult)
- sequential.py: one task after another (baseline, total = sum of delays)
- threaded.py: one thread per task (parallel-worker strategy)
- cooperative.py: SleepingLoop + Suspend (cooperative single-worker strategy)
- asyncio_runner.py: the same cooperative idea on asyncio
"""

from .asyncio_runner import AsyncioRunner
from .base import BaseRunner, EventRecorder
from .cooperative import CooperativeRunner, SleepingLoop, Suspend
from .sequential import SequentialRunner
from .threaded import ThreadedRunner

RUNNERS: dict[str, type[BaseRunner]] = {
    ThreadedRunner.strategy: ThreadedRunner,
    CooperativeRunner.strategy: CooperativeRunner,
    AsyncioRunner.strategy: AsyncioRunner,
    SequentialRunner.strategy: SequentialRunner,
}

__all__ = [
    "RUNNERS",
    "AsyncioRunner",
    "BaseRunner",
    "CooperativeRunner",
    "EventRecorder",
    "SequentialRunner",
    "SleepingLoop",
    "Suspend",
    "ThreadedRunner",
]
