# src/taskdeck/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from ..tasks.task_query import TaskQuery
from .ports import Clock, TaskRepo


@dataclass
class AppState:
    # Settings object (taskdeck.config.Settings or a test stand-in).
    settings: object

    task_store: TaskRepo
    clock: Clock = datetime.now

    # View state held by the presentation layer, passed into the query engine.
    query: TaskQuery = field(default_factory=TaskQuery)

    def today(self) -> date:
        return self.clock().date()
