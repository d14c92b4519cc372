"""UI components."""

from .screens.login import LoginScreen
from .screens.tasks import TaskScreen

__all__ = [
    "LoginScreen",
    "TaskScreen",
]
