"""Service for applying the search term to tasks."""

from collections.abc import Iterable

from ..models import Task


class FilterService:
    """Pure search filtering over a task sequence."""

    def apply(self, tasks: Iterable[Task], term: str | None) -> list[Task]:
        """Return the tasks matching term, in their original order."""
        return [task for task in tasks if self.matches(task, term)]

    def matches(self, task: Task, term: str | None) -> bool:
        """
        Check if a task matches the search term.

        An empty term matches every task. Otherwise the term must appear
        (case-insensitive) in the title or the description. The term is
        not trimmed, so whitespace is significant.
        """
        if not term:
            return True

        needle = term.lower()
        return needle in task.title.lower() or needle in task.description.lower()
