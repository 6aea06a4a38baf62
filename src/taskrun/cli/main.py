# src/taskrun/cli/main.py

"""
CLI entrypoint.

    taskrun [NAME=DELAY ...]

Initializes logging, builds the runner from settings, then runs one batch
(the demo batch when no tasks are given). Behaviour beyond the task list is
configured through TASKRUN_* environment variables, not flags.

Exit codes: 0 on completion, 2 on invalid input, 1 when a worker fails.
"""

from __future__ import annotations

import argparse
import logging
import sys

from ..cli.bootstrap import create_runner
from ..config import Settings, get_settings
from ..connectors.console_connector import ConsoleEventSink
from ..logging_setup import setup_logging
from ..tasks.task_api import DEMO_BATCH, parse_task_specs
from ..tasks.task_models import InputValidationError, TaskRunError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_RUN_FAILED = 1
EXIT_INVALID_INPUT = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskrun",
        description="Run simulated tasks concurrently and print when each starts and finishes.",
        epilog="Strategy and time unit come from TASKRUN_STRATEGY / TASKRUN_TIME_UNIT.",
    )
    parser.add_argument(
        "tasks",
        nargs="*",
        metavar="NAME=DELAY",
        help='task name and delay in time units, e.g. "Task 1=3" (default: the demo batch)',
    )
    return parser


def main(argv: list[str] | None = None, *, settings: Settings | None = None) -> int:
    if settings is None:
        settings = get_settings()

    console_level = getattr(logging, str(settings.log_level).upper(), logging.INFO)
    setup_logging(
        console_level=console_level,
        log_file=settings.log_file if settings.log_to_file else None,
    )

    args = _build_parser().parse_args(argv)

    sink = ConsoleEventSink(show_times=settings.show_times)
    runner = create_runner(settings=settings, sink=sink)
    logger.info("Starting %s (strategy=%s)", settings.app_name, runner.strategy)

    try:
        tasks = parse_task_specs(args.tasks) if args.tasks else list(DEMO_BATCH)
        result = runner.run(tasks)
    except InputValidationError as exc:
        print(f"{settings.app_name}: invalid input: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except TaskRunError as exc:
        logger.error("Batch aborted: %s", exc)
        print(f"{settings.app_name}: {exc}", file=sys.stderr)
        return EXIT_RUN_FAILED

    sink.batch_finished(result)
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
