"""Error types raised by the todolist core."""


class TodoError(Exception):
    """Base exception for todolist errors.

    The string form is the message shown to the user.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TodoError, ValueError):
    """User input failed validation."""

    pass


class InvalidArgumentError(ValidationError):
    """A required argument was empty or missing."""

    pass


class TaskNotFoundError(TodoError, LookupError):
    """The referenced task is not in the store (nothing selected)."""

    pass
