# tests/test_task_models.py

from __future__ import annotations

import pytest

from taskrun.tasks.task_models import (
    EventKind,
    InputValidationError,
    RunResult,
    Task,
    TaskEvent,
    validate_batch,
)


def test_validate_batch_accepts_tasks_and_pairs_in_order() -> None:
    batch = validate_batch([Task("a", 1), ("b", 2.5), ("c", 0)])

    assert batch == (Task("a", 1), Task("b", 2.5), Task("c", 0))


@pytest.mark.parametrize("delay", [-1, -0.001, float("nan"), float("inf"), "3", None, True])
def test_validate_batch_rejects_bad_delays(delay) -> None:
    with pytest.raises(InputValidationError):
        validate_batch([("t", delay)])


@pytest.mark.parametrize("item", [("only-name",), "t=1", 42, ("a", 1, 2)])
def test_validate_batch_rejects_malformed_items(item) -> None:
    with pytest.raises(InputValidationError):
        validate_batch([item])


@pytest.mark.parametrize("name", ["", "   ", None, 7])
def test_validate_batch_rejects_bad_names(name) -> None:
    with pytest.raises(InputValidationError):
        validate_batch([(name, 1)])


def test_validate_batch_rejects_duplicates() -> None:
    with pytest.raises(InputValidationError, match="duplicate"):
        validate_batch([("x", 1), ("y", 1), ("x", 2)])


def test_input_validation_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        validate_batch([("x", -1)])


def test_run_result_helpers() -> None:
    events = (
        TaskEvent("Task 1", EventKind.STARTED, 0.0),
        TaskEvent("Task 2", EventKind.STARTED, 0.0),
        TaskEvent("Task 2", EventKind.FINISHED, 0.2),
        TaskEvent("Task 1", EventKind.FINISHED, 0.3),
    )
    result = RunResult(
        strategy="threads",
        tasks=(Task("Task 1", 3), Task("Task 2", 2)),
        events=events,
        elapsed=0.3,
        time_unit=0.1,
    )

    assert result.max_delay == 3
    assert result.total_delay == 5
    assert result.elapsed_units == pytest.approx(3.0)
    assert result.finish_order() == ["Task 2", "Task 1"]
    assert [str(e) for e in result.events_for("Task 1")] == ["Task 1 started", "Task 1 finished"]
    assert result.summary() == (
        "All 2 task(s) finished in 3.00 time units (sum of delays: 5, strategy: threads)"
    )


def test_empty_run_result() -> None:
    result = RunResult(strategy="asyncio", tasks=(), events=(), elapsed=0.0)

    assert result.max_delay == 0.0
    assert result.total_delay == 0.0
    assert result.finish_order() == []
