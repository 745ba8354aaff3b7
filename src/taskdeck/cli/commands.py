# src/taskdeck/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Any, cast

from ..core.state import AppState
from ..tasks.task_classify import distinct_categories, due_date_status, task_stats
from ..tasks.task_models import (
    CategoryScope,
    CompletionFilter,
    DueDateStatus,
    MutationResult,
    Priority,
    Task,
    TaskStats,
)
from ..tasks.task_ordering import SortKey, sort_store

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# --------------------------------------------------------------------------------------
# Argument parsing
# --------------------------------------------------------------------------------------


class OptionError(ValueError):
    """Bad inline option in /add or /edit (shown to the user as-is)."""


@dataclass(frozen=True, slots=True)
class TaskDraft:
    """Form contents for create/update, like the add/edit input of the UI."""

    text: str
    priority: Priority
    due_date: date | None = None
    category: str | None = None

    @classmethod
    def from_task(cls, task: Task) -> TaskDraft:
        return cls(
            text=task.text,
            priority=task.priority,
            due_date=task.due_date,
            category=task.category,
        )


def parse_due(raw: str, today: date) -> date | None:
    """
    Due-date shortcuts:
      today | tomorrow | week (today + 7) | none | YYYY-MM-DD
    """
    value = raw.strip().lower()
    if value in ("today", "tod"):
        return today
    if value in ("tomorrow", "tom"):
        return today + timedelta(days=1)
    if value in ("week", "nextweek", "next-week"):
        return today + timedelta(days=7)
    if value in ("none", "-", ""):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise OptionError(
            f"Bad due date: {raw!r} (use today, tomorrow, week, none or YYYY-MM-DD)."
        ) from None


def parse_task_args(args: list[str], today: date) -> tuple[list[str], dict[str, Any]]:
    """
    Split /add and /edit arguments into text words and field overrides.

      !high | !medium | !low    priority
      @name                     category ("@-" clears it)
      due:<shortcut>            see parse_due
    """
    words: list[str] = []
    overrides: dict[str, Any] = {}

    for token in args:
        if token.startswith("!") and len(token) > 1:
            try:
                overrides["priority"] = Priority.parse(token[1:])
            except ValueError:
                raise OptionError(f"Bad priority: {token!r} (use !high, !medium or !low).") from None
        elif token.startswith("@") and len(token) > 1:
            name = token[1:]
            overrides["category"] = None if name == "-" else name
        elif token.lower().startswith("due:"):
            overrides["due_date"] = parse_due(token[4:], today)
        else:
            words.append(token)

    return words, overrides


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0].lstrip("#"))
    except ValueError:
        return None


# --------------------------------------------------------------------------------------
# Rendering
# --------------------------------------------------------------------------------------

_DUE_LABELS = {
    DueDateStatus.OVERDUE: "overdue",
    DueDateStatus.DUE_TODAY: "today",
    DueDateStatus.UPCOMING: "upcoming",
}


def format_task(task: Task, today: date) -> str:
    mark = "x" if task.completed else " "
    details = [task.priority.value]
    if task.category is not None:
        details.append(f"@{task.category}")
    status = due_date_status(task, today=today)
    if task.due_date is not None:
        details.append(f"due {task.due_date.isoformat()} ({_DUE_LABELS[status]})")
    return f"{task.id:>3}. [{mark}] {task.text}  ({', '.join(details)})"


def format_stats(stats: TaskStats, *, compact: bool = False) -> str:
    if compact:
        return f"T:{stats.total} A:{stats.active} C:{stats.completed}"
    line = f"Total: {stats.total} | Active: {stats.active} | Completed: {stats.completed}"
    if stats.categories > 0:
        line += f" | Categories: {stats.categories}"
    return line


def _describe_query(state: AppState) -> str:
    q = state.query
    category = q.category.value if isinstance(q.category, CategoryScope) else f"@{q.category}"
    search = f'"{q.search_text}"' if q.search_text else "-"
    return f"Filters: search={search} show={q.completion.value} category={category}"


def _compact(state: AppState) -> bool:
    return bool(getattr(state.settings, "compact", False))


# --------------------------------------------------------------------------------------
# Handlers
# --------------------------------------------------------------------------------------


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <text> [!priority] [@category] [due:...]
    """
    try:
        words, overrides = parse_task_args(args, state.today())
    except OptionError as e:
        logger.debug("Rejected task options %s: %s", args, e)
        return str(e)

    default_priority = getattr(state.settings, "default_priority", Priority.MEDIUM)
    draft = replace(TaskDraft(text=" ".join(words), priority=default_priority), **overrides)

    task = state.task_store.create(
        draft.text,
        draft.priority,
        due_date=draft.due_date,
        category=draft.category,
    )
    if task is None:
        return "Nothing to add (task text is empty)."
    return f"Added #{task.id}: {task.text}"


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <id> [new text] [!priority] [@category|@-] [due:...]

    Starts from the stored task; only what is given changes.
    """
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /edit <id> [text] [!priority] [@category|@-] [due:...]"

    current = state.task_store.get(task_id)
    if current is None:
        return f"Task #{task_id} not found."

    try:
        words, overrides = parse_task_args(args[1:], state.today())
    except OptionError as e:
        logger.debug("Rejected task options %s: %s", args, e)
        return str(e)

    if words:
        overrides["text"] = " ".join(words)
    draft = replace(TaskDraft.from_task(current), **overrides)

    result = state.task_store.update(
        task_id,
        text=draft.text,
        priority=draft.priority,
        due_date=draft.due_date,
        category=draft.category,
    )
    if result is MutationResult.NOT_FOUND:
        return f"Task #{task_id} not found."
    if result is MutationResult.SKIPPED:
        return "Task text cannot be empty."
    return f"Updated #{task_id}."


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"
    if state.task_store.toggle_completion(task_id) is MutationResult.NOT_FOUND:
        return f"Task #{task_id} not found."
    task = state.task_store.get(task_id)
    done = task is not None and task.completed
    return f"Task #{task_id} marked {'completed' if done else 'active'}."


def cmd_rm(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /rm <id>"
    if state.task_store.delete(task_id) is MutationResult.NOT_FOUND:
        return f"Task #{task_id} not found."
    return f"Deleted #{task_id}."


def cmd_list(state: AppState, args: list[str]) -> str:
    all_tasks = state.task_store.all()
    visible = state.query.apply(all_tasks)
    today = state.today()

    lines: list[str] = []
    if not state.query.is_default:
        lines.append(_describe_query(state))

    if not visible:
        lines.append("No tasks match the current filters." if all_tasks else "No tasks yet.")
    else:
        lines.extend(format_task(t, today) for t in visible)

    lines.append(format_stats(task_stats(all_tasks), compact=_compact(state)))
    return "\n".join(lines)


def cmd_find(state: AppState, args: list[str]) -> str:
    """
    /find <text>  -> case-insensitive search
    /find         -> clear search
    """
    text = " ".join(args)
    state.query = replace(state.query, search_text=text)
    return f'Search set to "{text}".' if text else "Search cleared."


_COMPLETION_ALIASES = {
    "all": CompletionFilter.ALL,
    "active": CompletionFilter.ACTIVE,
    "done": CompletionFilter.COMPLETED,
    "completed": CompletionFilter.COMPLETED,
}


def cmd_show(state: AppState, args: list[str]) -> str:
    if not args or args[0].lower() not in _COMPLETION_ALIASES:
        return "Usage: /show all | active | done"
    completion = _COMPLETION_ALIASES[args[0].lower()]
    state.query = replace(state.query, completion=completion)
    return f"Showing {completion.value} tasks."


def cmd_cat(state: AppState, args: list[str]) -> str:
    """
    /cat all            -> every category
    /cat none           -> only uncategorized tasks
    /cat <name>         -> exact category ("=all" selects a category named "all")
    """
    if not args:
        return "Usage: /cat all | none | <name>"

    raw = " ".join(args)
    lowered = raw.lower()
    category: CategoryScope | str
    if lowered == "all":
        category = CategoryScope.ALL
    elif lowered in ("none", "uncategorized"):
        category = CategoryScope.UNCATEGORIZED
    else:
        category = raw[1:] if raw.startswith("=") else raw

    state.query = replace(state.query, category=category)
    if isinstance(category, CategoryScope):
        return f"Category filter: {category.value}."
    return f"Category filter: @{category}."


_SORT_ALIASES = {
    "p": SortKey.PRIORITY,
    "priority": SortKey.PRIORITY,
    "d": SortKey.DATE,
    "date": SortKey.DATE,
    "c": SortKey.CATEGORY,
    "category": SortKey.CATEGORY,
}


def cmd_sort(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /sort priority | date | category

    Reorders the stored tasks; the new order is sent line by line through emit.
    """
    if not args or args[0].lower() not in _SORT_ALIASES:
        return "Usage: /sort priority | date | category"
    key = _SORT_ALIASES[args[0].lower()]
    ordered = sort_store(state.task_store, key)
    if emit is not None:
        today = state.today()
        for t in ordered:
            emit(format_task(t, today))
    return f"Tasks sorted by {key.value}."


def cmd_stats(state: AppState, args: list[str]) -> str:
    return format_stats(task_stats(state.task_store.all()), compact=_compact(state))


def cmd_cats(state: AppState, args: list[str]) -> str:
    names = distinct_categories(state.task_store.all())
    if not names:
        return "No categories yet."
    return "Categories: " + ", ".join(names)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add <text> [!high|!medium|!low] [@category] [due:today|tomorrow|week|YYYY-MM-DD].",
    aliases=["a"],
)
registry.register(
    "edit", cmd_edit, help_text="Edit a task: /edit <id> [text] [options]; @- clears category, due:none clears date."
)
registry.register("done", cmd_done, help_text="Toggle completion: /done <id>.", aliases=["toggle", "x"])
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["del", "delete"])
registry.register("list", cmd_list, help_text="List tasks matching the current filters.", aliases=["ls", "l"])
registry.register("find", cmd_find, help_text="Search task text: /find <text> (no text clears).", aliases=["search"])
registry.register("show", cmd_show, help_text="Completion filter: /show all | active | done.")
registry.register("cat", cmd_cat, help_text="Category filter: /cat all | none | <name>.")
registry.register("sort", cmd_sort, help_text="Reorder tasks: /sort priority | date | category.")
registry.register("stats", cmd_stats, help_text="Show task counts.")
registry.register("cats", cmd_cats, help_text="List categories in first-seen order.")
