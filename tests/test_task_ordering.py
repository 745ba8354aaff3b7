# tests/test_task_ordering.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from taskdeck.tasks.task_models import Priority
from taskdeck.tasks.task_ordering import (
    SortKey,
    sort_by_category,
    sort_by_date,
    sort_by_priority,
    sort_store,
    sorted_tasks,
)
from taskdeck.tasks.task_store import TaskStore

from .conftest import NOW
from .fakes import FakeClock


def _texts(store: TaskStore) -> list[str]:
    return [t.text for t in store.all()]


def test_priority_sort_is_stable_and_idempotent(store: TaskStore) -> None:
    store.create("low-1", Priority.LOW)
    store.create("high-1", Priority.HIGH)
    store.create("med-1", Priority.MEDIUM)
    store.create("high-2", Priority.HIGH)
    store.create("low-2", Priority.LOW)

    sort_by_priority(store)
    once = _texts(store)
    assert once == ["high-1", "high-2", "med-1", "low-1", "low-2"]

    sort_by_priority(store)
    assert _texts(store) == once


def test_date_sort_uses_due_date_else_created_at(store: TaskStore, clock: FakeClock) -> None:
    today = NOW.date()
    store.create("no due, created first")
    clock.advance(days=1)
    store.create("due in a week", due_date=today + timedelta(days=7))
    store.create("due yesterday", due_date=today - timedelta(days=1))
    clock.advance(days=1)
    store.create("no due, created last")

    sort_by_date(store)
    assert _texts(store) == [
        "due yesterday",
        "no due, created first",
        "no due, created last",
        "due in a week",
    ]


def test_category_sort_puts_uncategorized_last(store: TaskStore) -> None:
    store.create("none-1")
    store.create("b", category="beta")
    store.create("none-2")
    store.create("A", category="Alpha")
    store.create("a", category="alpha")

    sort_by_category(store)
    # plain string order: uppercase before lowercase
    assert _texts(store) == ["A", "a", "b", "none-1", "none-2"]

    ordered = store.all()
    last_named = max(i for i, t in enumerate(ordered) if t.category is not None)
    first_unnamed = min(i for i, t in enumerate(ordered) if t.category is None)
    assert last_named < first_unnamed


def test_sorted_tasks_is_pure(store: TaskStore) -> None:
    store.create("low", Priority.LOW)
    store.create("high", Priority.HIGH)

    result = sorted_tasks(store.all(), SortKey.PRIORITY)

    assert [t.text for t in result] == ["high", "low"]
    assert _texts(store) == ["low", "high"]


def test_sort_store_accepts_key_names(store: TaskStore) -> None:
    store.create("z", category="z")
    store.create("a", category="a")

    returned = sort_store(store, "category")

    assert [t.text for t in returned] == ["a", "z"]
    assert _texts(store) == ["a", "z"]
    with pytest.raises(ValueError):
        sort_store(store, "colour")


def test_scenario_priority_and_date_orders(store: TaskStore, clock: FakeClock) -> None:
    today = NOW.date()
    a = store.create("A", Priority.LOW, due_date=today + timedelta(days=7))
    b = store.create("B", Priority.HIGH, due_date=today)
    # C has no due date and is created after A's due date has passed
    clock.advance(days=8)
    c = store.create("C", Priority.MEDIUM)
    assert a is not None and b is not None and c is not None

    sort_by_priority(store)
    assert [t.id for t in store.all()] == [b.id, c.id, a.id]

    sort_by_date(store)
    assert [t.id for t in store.all()] == [b.id, a.id, c.id]


def test_date_sort_with_same_day_creation(store: TaskStore) -> None:
    today = NOW.date()
    store.create("A", Priority.LOW, due_date=today + timedelta(days=7))
    store.create("B", Priority.HIGH, due_date=today)
    store.create("C", Priority.MEDIUM)

    sort_by_date(store)
    # B is due at midnight today, C was created later today
    assert _texts(store) == ["B", "C", "A"]


def test_date_sort_is_stable_on_equal_dates() -> None:
    midnight = datetime(2026, 3, 10)
    store = TaskStore(clock=FakeClock(midnight))
    due = midnight.date()
    store.create("later", due_date=due + timedelta(days=1))
    store.create("same due 1", due_date=due)
    store.create("created at midnight")  # created_at equals the midnight of `due`
    store.create("same due 2", due_date=due)

    sort_by_date(store)
    once = _texts(store)
    assert once == ["same due 1", "created at midnight", "same due 2", "later"]

    sort_by_date(store)
    assert _texts(store) == once


def test_sorted_tasks_keeps_input_order_for_ties(store: TaskStore) -> None:
    due = NOW.date() - timedelta(days=5)
    first = store.create("one", due_date=due)
    second = store.create("two", due_date=due)
    third = store.create("three", due_date=due)
    assert first is not None and second is not None and third is not None

    shuffled = [third, first, second]
    assert [t.id for t in sorted_tasks(shuffled, SortKey.DATE)] == [third.id, first.id, second.id]


def test_date_sort_with_timezone_aware_clock() -> None:
    clock = FakeClock(datetime(2026, 3, 10, 9, 30, tzinfo=timezone.utc))
    store = TaskStore(clock=clock)
    store.create("no due")
    store.create("due tomorrow", due_date=clock.now.date() + timedelta(days=1))
    store.create("due today", due_date=clock.now.date())

    sort_by_date(store)
    assert _texts(store) == ["due today", "no due", "due tomorrow"]
