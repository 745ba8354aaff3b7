# src/taskdeck/tasks/task_ordering.py

from __future__ import annotations

"""
Ordering engine.

Each sort key defines a total order over tasks. `sorted_tasks` is pure;
`sort_store` writes the new order back into the store (destructive).

Python's sorted() is stable, so tasks with equal keys keep their current
relative order and every sort is idempotent.
"""

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, time
from enum import StrEnum
from typing import Any

from ..core.ports import TaskRepo
from .task_models import Task

logger = logging.getLogger(__name__)


class SortKey(StrEnum):
    PRIORITY = "priority"
    DATE = "date"
    CATEGORY = "category"


def priority_key(task: Task) -> int:
    # high < medium < low
    return task.priority.rank


def date_key(task: Task) -> datetime:
    """
    Due date (at midnight) if set, else creation time.

    Midnight takes the tzinfo of created_at, so naive and timezone-aware
    clocks both compare cleanly (as long as one clock feeds the store).
    """
    if task.due_date is not None:
        return datetime.combine(task.due_date, time.min, tzinfo=task.created_at.tzinfo)
    return task.created_at


def category_key(task: Task) -> tuple[bool, str]:
    # Uncategorized sorts after every real name.
    return (task.category is None, task.category or "")


_KEYS: dict[SortKey, Callable[[Task], Any]] = {
    SortKey.PRIORITY: priority_key,
    SortKey.DATE: date_key,
    SortKey.CATEGORY: category_key,
}


def sorted_tasks(tasks: Iterable[Task], by: SortKey | str) -> list[Task]:
    key = _KEYS[SortKey(by)]
    return sorted(tasks, key=key)


def sort_store(store: TaskRepo, by: SortKey | str) -> list[Task]:
    """Resort the whole stored sequence and return the new order."""
    ordered = sorted_tasks(store.all(), by)
    store.reorder(t.id for t in ordered)
    logger.debug("Store sorted by %s (%s tasks)", SortKey(by).value, len(ordered))
    return ordered


def sort_by_priority(store: TaskRepo) -> list[Task]:
    return sort_store(store, SortKey.PRIORITY)


def sort_by_date(store: TaskRepo) -> list[Task]:
    return sort_store(store, SortKey.DATE)


def sort_by_category(store: TaskRepo) -> list[Task]:
    return sort_store(store, SortKey.CATEGORY)
