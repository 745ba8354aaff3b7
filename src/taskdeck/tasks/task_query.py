# src/taskdeck/tasks/task_query.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .task_models import CategoryScope, CompletionFilter, Task

CategoryFilter = CategoryScope | str


def _matches_search(task: Task, needle: str) -> bool:
    return not needle or needle in task.text.lower()


def _matches_completion(task: Task, completion: CompletionFilter) -> bool:
    if completion == CompletionFilter.ACTIVE:
        return not task.completed
    if completion == CompletionFilter.COMPLETED:
        return task.completed
    return True


def _matches_category(task: Task, category: CategoryFilter) -> bool:
    if category is CategoryScope.ALL:
        return True
    if category is CategoryScope.UNCATEGORIZED:
        return task.category is None
    return task.category == category


def filter_tasks(
    tasks: Iterable[Task],
    search_text: str = "",
    completion: CompletionFilter = CompletionFilter.ALL,
    category: CategoryFilter = CategoryScope.ALL,
) -> list[Task]:
    """
    Select the tasks matching all three criteria, keeping input order.

    - search_text: case-insensitive substring of the task text ("" matches all)
    - completion: all / active / completed
    - category: CategoryScope.ALL, CategoryScope.UNCATEGORIZED or an exact name
    """
    needle = search_text.lower()
    return [
        t
        for t in tasks
        if _matches_search(t, needle)
        and _matches_completion(t, completion)
        and _matches_category(t, category)
    ]


@dataclass(frozen=True, slots=True)
class TaskQuery:
    """Caller-held filter settings for a view; the store never sees them."""

    search_text: str = ""
    completion: CompletionFilter = CompletionFilter.ALL
    category: CategoryFilter = CategoryScope.ALL

    def apply(self, tasks: Iterable[Task]) -> list[Task]:
        return filter_tasks(tasks, self.search_text, self.completion, self.category)

    @property
    def is_default(self) -> bool:
        return (
            not self.search_text
            and self.completion == CompletionFilter.ALL
            and self.category is CategoryScope.ALL
        )
