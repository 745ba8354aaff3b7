# src/taskdeck/tasks/task_classify.py

"""
Pure derivations over tasks: due-date status, categories, statistics.

Nothing here is cached; callers recompute on every read.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from .task_models import DueDateStatus, Task, TaskStats


def due_date_status(task: Task, *, today: date | None = None) -> DueDateStatus:
    """
    Classify a task's due date against today's date.

    Both sides are plain dates (no time-of-day), so "due later today" is never
    reported as overdue.
    """
    if task.due_date is None:
        return DueDateStatus.NONE
    if today is None:
        today = date.today()

    if task.due_date < today:
        return DueDateStatus.OVERDUE
    if task.due_date == today:
        return DueDateStatus.DUE_TODAY
    return DueDateStatus.UPCOMING


def distinct_categories(tasks: Iterable[Task]) -> list[str]:
    """Unique categories in first-seen order; uncategorized tasks are skipped."""
    seen: dict[str, None] = {}
    for t in tasks:
        if t.category is not None:
            seen.setdefault(t.category, None)
    return list(seen)


def task_stats(tasks: Iterable[Task]) -> TaskStats:
    items = list(tasks)
    completed = sum(1 for t in items if t.completed)
    return TaskStats(
        total=len(items),
        active=len(items) - completed,
        completed=completed,
        categories=len(distinct_categories(items)),
    )
