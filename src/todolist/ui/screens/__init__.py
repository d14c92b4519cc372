"""Screen components."""

from .login import LoginScreen
from .tasks import TaskScreen

__all__ = [
    "LoginScreen",
    "TaskScreen",
]
