# src/taskdeck/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum, StrEnum


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Sort rank: lower means more urgent."""
        return _PRIORITY_RANK[self]

    @classmethod
    def parse(cls, raw: str | Priority) -> Priority:
        if isinstance(raw, Priority):
            return raw
        value = raw.strip().lower()
        for p in cls:
            if value in (p.value, p.value[0]):
                return p
        raise ValueError(f"Unknown priority: {raw!r}")


_PRIORITY_RANK = {Priority.HIGH: 1, Priority.MEDIUM: 2, Priority.LOW: 3}


class DueDateStatus(StrEnum):
    NONE = "none"
    OVERDUE = "overdue"
    DUE_TODAY = "due_today"
    UPCOMING = "upcoming"


class CompletionFilter(StrEnum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


class CategoryScope(Enum):
    """
    Category filter scopes that are not a concrete category name.

    Plain Enum (not StrEnum): a category literally named "all" never compares
    equal to CategoryScope.ALL.
    """

    ALL = "all"
    UNCATEGORIZED = "uncategorized"


class MutationResult(StrEnum):
    OK = "ok"
    NOT_FOUND = "not_found"
    SKIPPED = "skipped"  # blank text on update


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    created_at: datetime
    priority: Priority = Priority.MEDIUM
    completed: bool = False
    due_date: date | None = None
    category: str | None = None


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    active: int
    completed: int
    categories: int


def normalize_category(raw: str | None) -> str | None:
    """Trim a category; empty or whitespace-only means no category."""
    if raw is None:
        return None
    cleaned = raw.strip()
    return cleaned or None


def normalize_due_date(raw: date | datetime | None) -> date | None:
    """Drop the time-of-day: due dates have date granularity."""
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw.date()
    return raw
