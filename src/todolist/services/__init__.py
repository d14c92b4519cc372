"""Service layer for business logic."""

from .credential_directory import SEED_ACCOUNTS, CredentialDirectory
from .filter_service import FilterService
from .task_store import ChangeKind, StoreChange, TaskStore

__all__ = [
    "SEED_ACCOUNTS",
    "ChangeKind",
    "CredentialDirectory",
    "FilterService",
    "StoreChange",
    "TaskStore",
]
