# src/taskrun/runners/sequential.py

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from ..tasks.task_models import Task, TaskRunError
from .base import BaseRunner, EventRecorder

logger = logging.getLogger(__name__)


class SequentialRunner(BaseRunner):
    """
    Baseline: one task after another on the calling thread.

    Total time is the sum of the delays; the concurrent strategies are measured against it.
    """

    strategy = "sequential"

    def __init__(self, *, sleep: Callable[[float], None] = time.sleep, **kwargs) -> None:
        super().__init__(**kwargs)
        self._sleep = sleep

    def _execute(self, batch: tuple[Task, ...], recorder: EventRecorder) -> None:
        for task in batch:
            try:
                recorder.started(task)
                self._sleep(self.seconds(task))
                recorder.finished(task)
            except Exception as exc:
                logger.exception("task failed name=%s", task.name)
                raise TaskRunError(task.name, exc) from exc
