"""Run a batch of simulated tasks so that their delays overlap."""

from .tasks.task_api import DEMO_BATCH, get_runner, parse_task_spec, run_batch
from .tasks.task_models import (
    EventKind,
    InputValidationError,
    RunResult,
    Task,
    TaskEvent,
    TaskrunError,
    TaskRunError,
    validate_batch,
)

__all__ = [
    "DEMO_BATCH",
    "EventKind",
    "InputValidationError",
    "RunResult",
    "Task",
    "TaskEvent",
    "TaskRunError",
    "TaskrunError",
    "get_runner",
    "parse_task_spec",
    "run_batch",
    "validate_batch",
]
