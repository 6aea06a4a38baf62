# src/taskrun/connectors/console_connector.py

from __future__ import annotations

import sys

from ..tasks.task_models import RunResult, TaskEvent


class ConsoleEventSink:
    """
    Writes the event log: one "<name> started" / "<name> finished" line per event.

    stdout is reserved for this log; diagnostics go through logging (stderr).
    """

    def __init__(self, *, show_times: bool = False) -> None:
        self.show_times = show_times

    def emit(self, event: TaskEvent) -> None:
        line = str(event)
        if self.show_times:
            line = f"[{event.at:7.3f}s] {line}"
        # sys.stdout is looked up per call so a replaced stdout (e.g. pytest capsys) is honoured.
        print(line, file=sys.stdout, flush=True)

    def batch_finished(self, result: RunResult) -> None:
        print(result.summary(), file=sys.stdout, flush=True)
