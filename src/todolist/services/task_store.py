"""Session-scoped task collection with a live search view."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ..errors import TaskNotFoundError, ValidationError
from ..models import Priority, Task
from .filter_service import FilterService

logger = logging.getLogger(__name__)


class ChangeKind(str, Enum):
    """What a store mutation changed."""

    ADDED = "added"
    UPDATED = "updated"
    REMOVED = "removed"
    SEARCH_CHANGED = "search_changed"


@dataclass(frozen=True)
class StoreChange:
    """Notification sent to subscribers after every mutating call."""

    kind: ChangeKind
    task: Task | None = None  # None for search changes


Listener = Callable[[StoreChange], None]
TaskRef = Task | int | None


class TaskStore:
    """
    Owns one session's tasks and the filtered view derived from them.

    Tasks keep insertion order. The filtered view is recomputed from the
    task list and the search term after every add, update, remove and
    search change, so reading it never returns stale results. Subscribers
    are notified once the view is up to date.
    """

    def __init__(self, filter_service: FilterService | None = None) -> None:
        self._filter_service = filter_service or FilterService()
        self._tasks: list[Task] = []
        self._search_term = ""
        self._filtered: list[Task] = []
        self._listeners: list[Listener] = []
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> tuple[Task, ...]:
        """All tasks in insertion order."""
        return tuple(self._tasks)

    @property
    def filtered_view(self) -> tuple[Task, ...]:
        """Tasks matching the current search term, in insertion order."""
        return tuple(self._filtered)

    @property
    def search_term(self) -> str:
        return self._search_term

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener for store changes.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def get(self, task_id: int) -> Task:
        """Get a task by id, raising TaskNotFoundError if absent."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(f"Task not found: {task_id}")

    def add(
        self,
        title: str | None,
        description: str | None,
        priority: Priority | str | None,
    ) -> Task:
        """
        Create a task and append it to the end of the list.

        Title and description are trimmed. Raises ValidationError if the
        title is blank or no priority is given.
        """
        title, description, priority = self._validate(title, description, priority)

        task = Task(
            id=next(self._ids),
            title=title,
            description=description,
            priority=priority,
        )
        self._tasks.append(task)
        logger.info("Task created: %d %r (priority=%s)", task.id, task.title, task.priority.value)

        self._refresh(StoreChange(ChangeKind.ADDED, task))
        return task

    def update(
        self,
        task: TaskRef,
        title: str | None,
        description: str | None,
        priority: Priority | str | None,
    ) -> Task:
        """
        Replace the title, description and priority of an existing task.

        The task keeps its id and completion flag. Raises TaskNotFoundError
        if no task is given or it is no longer in the store, and
        ValidationError for invalid values.
        """
        target = self._resolve(task, "Please select a task to update")
        title, description, priority = self._validate(title, description, priority)

        target.title = title
        target.description = description
        target.priority = priority
        logger.info("Task updated: %d %r (priority=%s)", target.id, target.title, priority.value)

        self._refresh(StoreChange(ChangeKind.UPDATED, target))
        return target

    def remove(self, task: TaskRef) -> Task:
        """
        Remove a task from the store.

        Only the task with the matching id is removed, even if another
        task has identical fields. Raises TaskNotFoundError (leaving the
        store unchanged) if no task is given or it is not present.
        """
        target = self._resolve(task, "Please select a task to delete")

        self._tasks = [t for t in self._tasks if t.id != target.id]
        logger.info("Task deleted: %d %r", target.id, target.title)

        self._refresh(StoreChange(ChangeKind.REMOVED, target))
        return target

    def set_search_term(self, term: str | None) -> list[Task]:
        """Change the search term and return the new filtered view."""
        self._search_term = term or ""
        logger.debug("Search term set: %r", self._search_term)

        self._refresh(StoreChange(ChangeKind.SEARCH_CHANGED))
        return list(self._filtered)

    def _resolve(self, task: TaskRef, message: str) -> Task:
        """
        Find the stored task for a Task or id.

        A Task must be the very object held by this store; a task from
        another store that happens to share an id is not a member.
        """
        if task is None or isinstance(task, bool):
            raise TaskNotFoundError(message)

        task_id = task.id if isinstance(task, Task) else task
        try:
            stored = self.get(task_id)
        except TaskNotFoundError:
            logger.debug("Task %s is not in the store", task_id)
            raise TaskNotFoundError(message) from None

        if isinstance(task, Task) and stored is not task:
            logger.debug("Task %s belongs to another store", task_id)
            raise TaskNotFoundError(message)
        return stored

    def _validate(
        self,
        title: str | None,
        description: str | None,
        priority: Priority | str | None,
    ) -> tuple[str, str, Priority]:
        """Trim and check task fields. Title is checked before priority."""
        title = (title or "").strip()
        description = (description or "").strip()

        if not title:
            raise ValidationError("Title is required")

        if priority is None:
            raise ValidationError("Please select a priority")
        try:
            priority = Priority(priority)
        except ValueError:
            raise ValidationError("Please select a priority") from None

        return title, description, priority

    def _refresh(self, change: StoreChange) -> None:
        """Recompute the filtered view, then notify subscribers."""
        self._filtered = self._filter_service.apply(self._tasks, self._search_term)
        for listener in list(self._listeners):
            listener(change)
