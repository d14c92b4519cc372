"""Data models."""

from .account import Account
from .task import Priority, Task

__all__ = [
    "Account",
    "Priority",
    "Task",
]
