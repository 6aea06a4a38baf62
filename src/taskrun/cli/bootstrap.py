# src/taskrun/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- picks the runner class for the configured strategy,
- wires the console event sink into it.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..connectors.console_connector import ConsoleEventSink
from ..core.ports import EventSink
from ..runners import BaseRunner
from ..tasks.task_api import get_runner

logger = logging.getLogger(__name__)


def create_runner(*, settings: Settings | None = None, sink: EventSink | None = None) -> BaseRunner:
    """
    Build the runner described by settings.

    If settings is None, falls back to get_settings(); if sink is None, events go to stdout.
    """
    if settings is None:
        settings = get_settings()
    if sink is None:
        sink = ConsoleEventSink(show_times=settings.show_times)

    runner = get_runner(settings.strategy, time_unit=settings.time_unit, sink=sink)
    logger.debug("Runner ready strategy=%s time_unit=%s", runner.strategy, runner.time_unit)
    return runner
