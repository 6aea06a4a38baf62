# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskrun.config import Settings

from .fakes import FakeClock, RecordingSink

# Seconds per delay unit in timing tests: big enough to dwarf thread start-up,
# small enough to keep the suite quick.
TIME_UNIT = 0.1

CONCURRENT_STRATEGIES = ["threads", "cooperative", "asyncio"]


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(params=CONCURRENT_STRATEGIES)
def strategy(request) -> str:
    return request.param


@pytest.fixture(params=CONCURRENT_STRATEGIES + ["sequential"])
def any_strategy(request) -> str:
    return request.param


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings built directly rather than from the environment,
    to keep unit tests isolated and deterministic.
    """
    return Settings(
        app_name="taskrun-test",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path / "data",
        strategy="cooperative",
        time_unit=0.01,
        show_times=False,
    )
