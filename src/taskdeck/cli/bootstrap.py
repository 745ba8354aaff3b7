# src/taskdeck/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes settings once and wires the
concrete TaskStore and clock into AppState.
"""

from __future__ import annotations

import logging
from datetime import datetime

from ..config import get_settings
from ..core.ports import Clock
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, clock: Clock | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and the clock injectable makes the app easy to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    if clock is None:
        clock = datetime.now

    state = AppState(
        settings=settings,
        task_store=TaskStore(clock=clock),
        clock=clock,
    )
    logger.debug("AppState created (app=%s)", getattr(settings, "app_name", "taskdeck"))
    return state
