"""Task domain model."""

from enum import Enum

from pydantic import BaseModel


class Priority(str, Enum):
    """Priority levels for tasks, lowest first."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def label(self) -> str:
        """Human-readable label, e.g. "High Priority"."""
        return f"{self.value.title()} Priority"

    @property
    def rank(self) -> int:
        """Position in declaration order (LOW=0)."""
        return list(Priority).index(self)

    def __str__(self) -> str:
        return self.label


class Task(BaseModel):
    """A single to-do item.

    The id is assigned by the owning TaskStore and is the task's identity:
    two tasks with the same title, description and priority are still
    different tasks.
    """

    id: int
    title: str
    description: str = ""
    priority: Priority
    completed: bool = False

    @property
    def display_label(self) -> str:
        """Row text for task lists - title followed by the priority label."""
        return f"{self.title} ({self.priority.label})"
