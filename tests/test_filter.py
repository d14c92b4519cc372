"""Tests for FilterService."""

import pytest

from todolist.models import Priority, Task
from todolist.services import FilterService


@pytest.fixture
def filter_service() -> FilterService:
    """Create a FilterService instance."""
    return FilterService()


@pytest.fixture
def tasks() -> list[Task]:
    """Sample tasks in a known order."""
    return [
        Task(id=1, title="Buy Milk", description="from the corner shop", priority=Priority.LOW),
        Task(id=2, title="Fix login bug", description="", priority=Priority.HIGH),
        Task(id=3, title="Call mom", description="Ask about MILK recipe", priority=Priority.MEDIUM),
    ]


class TestMatches:
    """Tests for single-task matching."""

    def test_empty_term_matches(self, filter_service: FilterService, tasks: list[Task]):
        """Empty and None terms match every task."""
        assert all(filter_service.matches(t, "") for t in tasks)
        assert all(filter_service.matches(t, None) for t in tasks)

    def test_title_match_case_insensitive(self, filter_service: FilterService, tasks: list[Task]):
        """Title matching ignores case."""
        assert filter_service.matches(tasks[0], "milk")
        assert filter_service.matches(tasks[0], "MILK")
        assert not filter_service.matches(tasks[0], "bread")

    def test_description_match(self, filter_service: FilterService, tasks: list[Task]):
        """Description text is searched too."""
        assert filter_service.matches(tasks[0], "corner")
        assert filter_service.matches(tasks[2], "recipe")

    def test_whitespace_term_is_not_trimmed(self, filter_service: FilterService, tasks: list[Task]):
        """A whitespace-only term is a real search, not an empty one."""
        assert filter_service.matches(tasks[0], " ")
        assert not filter_service.matches(tasks[0], "   ")


class TestApply:
    """Tests for filtering a task list."""

    def test_keeps_order(self, filter_service: FilterService, tasks: list[Task]):
        """Matches come back in their original order."""
        result = filter_service.apply(tasks, "milk")
        assert [t.id for t in result] == [1, 3]

    def test_empty_term_returns_all(self, filter_service: FilterService, tasks: list[Task]):
        """Empty term returns all tasks."""
        assert filter_service.apply(tasks, "") == tasks

    def test_no_matches(self, filter_service: FilterService, tasks: list[Task]):
        """Non-matching term returns an empty list."""
        assert filter_service.apply(tasks, "zzz") == []

    def test_does_not_mutate_input(self, filter_service: FilterService, tasks: list[Task]):
        """apply returns a new list and leaves the input untouched."""
        original = list(tasks)
        filter_service.apply(tasks, "bug")
        assert tasks == original
