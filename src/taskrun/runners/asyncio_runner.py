# src/taskrun/runners/asyncio_runner.py

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from ..tasks.task_models import RunResult, Task, TaskRunError
from .base import BaseRunner, EventRecorder

logger = logging.getLogger(__name__)


class AsyncioRunner(BaseRunner):
    """
    Cooperative strategy on the stdlib event loop.

    asyncio.sleep is the yield point. run() owns a fresh loop via asyncio.run;
    run_async() is for callers that already are inside one.
    """

    strategy = "asyncio"

    def run(self, tasks: Iterable[Task | tuple[str, float]]) -> RunResult:
        # Validate before asyncio.run so bad input never creates a loop.
        batch = self.validate(tasks)
        return asyncio.run(self.run_async(batch))

    async def run_async(self, tasks: Iterable[Task | tuple[str, float]]) -> RunResult:
        batch = self.validate(tasks)
        recorder = self._start(batch)
        await self._execute_async(batch, recorder)
        return self._finish(batch, recorder)

    async def _one(self, task: Task, recorder: EventRecorder) -> None:
        try:
            recorder.started(task)
            await asyncio.sleep(self.seconds(task))
            recorder.finished(task)
        except Exception as exc:
            logger.exception("task failed name=%s", task.name)
            raise TaskRunError(task.name, exc) from exc

    async def _execute_async(self, batch: tuple[Task, ...], recorder: EventRecorder) -> None:
        try:
            # A failing task makes the group cancel its siblings, so nothing is left hanging.
            async with asyncio.TaskGroup() as tg:
                for task in batch:
                    tg.create_task(self._one(task, recorder), name=f"taskrun-{task.name}")
        except ExceptionGroup as eg:
            first = eg.exceptions[0]
            if isinstance(first, TaskRunError):
                raise first from first.cause
            raise
