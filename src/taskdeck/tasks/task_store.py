# src/taskdeck/tasks/task_store.py

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable
from dataclasses import replace
from datetime import date, datetime

from ..core.ports import Clock
from .task_models import (
    MutationResult,
    Priority,
    Task,
    normalize_category,
    normalize_due_date,
)

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    Owns the ordered sequence of tasks; sequence order is the current order.
    Records are frozen, so a mutation swaps the record at its position.

    Ids come from a per-store counter and are never reused, even after delete.
    Not thread-safe: a single caller owns the store.
    """

    def __init__(self, clock: Clock = datetime.now) -> None:
        self._clock = clock
        self._tasks: list[Task] = []
        self._ids = itertools.count(1)
        logger.info("TaskStore ready (in-memory)")

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- low-level helpers ----

    def _index_of(self, task_id: int) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    @staticmethod
    def _not_found(op: str, task_id: int) -> MutationResult:
        logger.warning("%s: task id=%s not found", op, task_id)
        return MutationResult.NOT_FOUND

    # ---- public API ----

    def all(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def get(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    def create(
        self,
        text: str,
        priority: Priority = Priority.MEDIUM,
        due_date: date | datetime | None = None,
        category: str | None = None,
    ) -> Task | None:
        """
        Append a new task.

        Blank text is silently ignored: nothing is stored and None is returned.
        """
        cleaned = (text or "").strip()
        if not cleaned:
            logger.debug("create skipped: blank text")
            return None

        task = Task(
            id=next(self._ids),
            text=cleaned,
            created_at=self._clock(),
            priority=Priority.parse(priority),
            due_date=normalize_due_date(due_date),
            category=normalize_category(category),
        )
        self._tasks.append(task)
        logger.debug(
            "Task added id=%s priority=%s due=%s category=%s",
            task.id,
            task.priority.value,
            task.due_date,
            task.category,
        )
        return task

    def update(
        self,
        task_id: int,
        *,
        text: str,
        priority: Priority,
        due_date: date | datetime | None = None,
        category: str | None = None,
    ) -> MutationResult:
        """
        Replace text, priority, due date and category of an existing task.

        id, created_at, completed and position are kept. A missing due date or
        category means "clear it", like on create.
        """
        idx = self._index_of(task_id)
        if idx is None:
            return self._not_found("update", task_id)

        cleaned = (text or "").strip()
        if not cleaned:
            logger.debug("update skipped: blank text id=%s", task_id)
            return MutationResult.SKIPPED

        self._tasks[idx] = replace(
            self._tasks[idx],
            text=cleaned,
            priority=Priority.parse(priority),
            due_date=normalize_due_date(due_date),
            category=normalize_category(category),
        )
        logger.debug("Task updated id=%s", task_id)
        return MutationResult.OK

    def delete(self, task_id: int) -> MutationResult:
        idx = self._index_of(task_id)
        if idx is None:
            return self._not_found("delete", task_id)
        del self._tasks[idx]
        logger.debug("Task deleted id=%s", task_id)
        return MutationResult.OK

    def toggle_completion(self, task_id: int) -> MutationResult:
        idx = self._index_of(task_id)
        if idx is None:
            return self._not_found("toggle_completion", task_id)
        current = self._tasks[idx]
        self._tasks[idx] = replace(current, completed=not current.completed)
        logger.debug("Task toggled id=%s completed=%s", task_id, not current.completed)
        return MutationResult.OK

    def reorder(self, task_ids: Iterable[int]) -> None:
        """
        Replace the sequence order with the given order of ids.

        The ids must be exactly a permutation of the live ids; anything else
        is a caller bug and raises ValueError without touching the store.
        """
        order = list(task_ids)
        by_id = {t.id: t for t in self._tasks}
        if len(order) != len(by_id) or set(order) != set(by_id):
            raise ValueError("reorder requires a permutation of the stored task ids")
        self._tasks = [by_id[i] for i in order]
        logger.debug("Tasks reordered count=%s", len(order))
