# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskrun.config import Settings

ENV_NAMES = [
    "TASKRUN_APP_NAME",
    "TASKRUN_LOG_LEVEL",
    "TASKRUN_LOG_TO_FILE",
    "TASKRUN_DATA_DIR",
    "TASKRUN_STRATEGY",
    "TASKRUN_TIME_UNIT",
    "TASKRUN_SHOW_TIMES",
]


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings.from_env()

    assert s.app_name == "taskrun"
    assert s.log_level == "INFO"
    assert s.log_to_file is False
    assert s.data_dir == Path(".local/taskrun")
    assert s.log_file == Path(".local/taskrun") / "taskrun.log"
    assert s.strategy == "threads"
    assert s.time_unit == 1.0
    assert s.show_times is False


def test_values_from_env(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("TASKRUN_APP_NAME", "demo")
    clean_env.setenv("TASKRUN_LOG_LEVEL", "debug")
    clean_env.setenv("TASKRUN_LOG_TO_FILE", "yes")
    clean_env.setenv("TASKRUN_DATA_DIR", str(tmp_path))
    clean_env.setenv("TASKRUN_STRATEGY", "Cooperative")
    clean_env.setenv("TASKRUN_TIME_UNIT", "0.25")
    clean_env.setenv("TASKRUN_SHOW_TIMES", "on")

    s = Settings.from_env()

    assert s.app_name == "demo"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is True
    assert s.data_dir == tmp_path
    assert s.strategy == "cooperative"
    assert s.time_unit == 0.25
    assert s.show_times is True


@pytest.mark.parametrize("raw", ["fast", "-1", "nan", ""])
def test_bad_time_unit_falls_back(clean_env: pytest.MonkeyPatch, raw: str) -> None:
    clean_env.setenv("TASKRUN_TIME_UNIT", raw)
    assert Settings.from_env().time_unit == 1.0


def test_unknown_strategy_falls_back(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TASKRUN_STRATEGY", "processes")
    assert Settings.from_env().strategy == "threads"
