# src/taskdeck/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the presentation layer.

Commands and connectors depend on these Protocols instead of the concrete
TaskStore, which keeps them testable with fakes.
"""

from collections.abc import Callable, Iterable
from datetime import date, datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import MutationResult, Priority, Task

Clock = Callable[[], datetime]
# Returns "now" (datetime.now by default). Naive or aware, but one kind per store.


class TaskRepo(Protocol):
    def __len__(self) -> int: ...
    def all(self) -> tuple[Task, ...]: ...
    def get(self, task_id: int) -> Task | None: ...

    def create(
            self,
            text: str,
            priority: Priority = ...,
            due_date: date | datetime | None = None,
            category: str | None = None,
    ) -> Task | None: ...

    def update(
            self,
            task_id: int,
            *,
            text: str,
            priority: Priority,
            due_date: date | datetime | None = None,
            category: str | None = None,
    ) -> MutationResult: ...

    def delete(self, task_id: int) -> MutationResult: ...
    def toggle_completion(self, task_id: int) -> MutationResult: ...

    # Ordering engine
    def reorder(self, task_ids: Iterable[int]) -> None: ...
