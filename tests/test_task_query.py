# tests/test_task_query.py

from __future__ import annotations

from datetime import datetime

import pytest

from taskdeck.tasks.task_models import CategoryScope, CompletionFilter, Task
from taskdeck.tasks.task_query import TaskQuery, filter_tasks


@pytest.fixture()
def tasks() -> list[Task]:
    created = datetime(2026, 3, 1, 8, 0)
    return [
        Task(id=1, text="Buy MILK", created_at=created, category="home"),
        Task(id=2, text="Write report", created_at=created, category="work", completed=True),
        Task(id=3, text="buy stamps", created_at=created),
        Task(id=4, text="Plan milk run", created_at=created, category="all", completed=True),
    ]


def _ids(items: list[Task]) -> list[int]:
    return [t.id for t in items]


def test_default_filter_is_identity(tasks: list[Task]) -> None:
    assert filter_tasks(tasks) == tasks
    assert filter_tasks(tasks, "", CompletionFilter.ALL, CategoryScope.ALL) == tasks
    assert filter_tasks([]) == []


def test_search_is_case_insensitive_substring(tasks: list[Task]) -> None:
    assert _ids(filter_tasks(tasks, "milk")) == [1, 4]
    assert _ids(filter_tasks(tasks, "BUY")) == [1, 3]
    assert filter_tasks(tasks, "nothing like this") == []


def test_completion_filter(tasks: list[Task]) -> None:
    assert _ids(filter_tasks(tasks, completion=CompletionFilter.ACTIVE)) == [1, 3]
    assert _ids(filter_tasks(tasks, completion=CompletionFilter.COMPLETED)) == [2, 4]


def test_category_filter(tasks: list[Task]) -> None:
    assert _ids(filter_tasks(tasks, category=CategoryScope.UNCATEGORIZED)) == [3]
    assert _ids(filter_tasks(tasks, category="work")) == [2]
    assert _ids(filter_tasks(tasks, category="Work")) == []
    # a category literally named "all" is a name, not the ALL scope
    assert _ids(filter_tasks(tasks, category="all")) == [4]


def test_predicates_are_anded_and_order_preserved(tasks: list[Task]) -> None:
    reversed_tasks = list(reversed(tasks))
    result = filter_tasks(reversed_tasks, "milk", CompletionFilter.COMPLETED, "all")
    assert _ids(result) == [4]
    assert _ids(filter_tasks(reversed_tasks, "b")) == [3, 1]


def test_task_query_applies_filters(tasks: list[Task]) -> None:
    q = TaskQuery()
    assert q.is_default
    assert q.apply(tasks) == tasks

    q = TaskQuery(search_text="buy", completion=CompletionFilter.ACTIVE, category=CategoryScope.ALL)
    assert not q.is_default
    assert _ids(q.apply(tasks)) == [1, 3]
