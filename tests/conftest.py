# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskdeck.core.state import AppState
from taskdeck.tasks.task_models import Priority
from taskdeck.tasks.task_store import TaskStore

from .fakes import FakeClock

NOW = datetime(2026, 3, 10, 9, 30)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    return TaskStore(clock=clock)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskdeck-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        log_to_file=False,
        default_priority=Priority.MEDIUM,
        compact=False,
    )


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, clock: FakeClock) -> AppState:
    return AppState(settings=settings, task_store=store, clock=clock)
