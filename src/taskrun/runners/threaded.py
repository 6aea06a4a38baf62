# src/taskrun/runners/threaded.py

"""
Parallel-worker strategy.

One threading.Thread per task. The OS scheduler decides how the workers
interleave; the runner only starts them all and joins them all.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

from ..tasks.task_models import Task, TaskRunError
from .base import BaseRunner, EventRecorder

logger = logging.getLogger(__name__)


class ThreadedRunner(BaseRunner):
    strategy = "threads"

    def __init__(self, *, sleep: Callable[[float], None] = time.sleep, **kwargs) -> None:
        super().__init__(**kwargs)
        self._sleep = sleep

    def _execute(self, batch: tuple[Task, ...], recorder: EventRecorder) -> None:
        failures: list[TaskRunError] = []
        failures_lock = threading.Lock()

        def _worker(task: Task) -> None:
            try:
                recorder.started(task)
                # time.sleep releases the GIL, so the other workers keep going.
                self._sleep(self.seconds(task))
                recorder.finished(task)
            except Exception as exc:
                logger.exception("worker failed name=%s", task.name)
                with failures_lock:
                    failures.append(TaskRunError(task.name, exc))

        threads = [
            threading.Thread(target=_worker, args=(task,), name=f"taskrun-{task.name}", daemon=True)
            for task in batch
        ]
        for t in threads:
            t.start()

        # Join everything first: a failed worker must not leave the others orphaned.
        for t in threads:
            t.join()

        if failures:
            first = failures[0]
            if len(failures) > 1:
                logger.warning("%d workers failed; raising the first", len(failures))
            raise first from first.cause
