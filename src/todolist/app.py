"""todolist TUI Application."""

import logging

from textual.app import App
from textual.binding import Binding

from .config import Settings
from .services import CredentialDirectory, TaskStore
from .ui.screens.login import LoginScreen
from .ui.screens.tasks import TaskScreen

logger = logging.getLogger(__name__)


class TodoApp(App):
    """todolist - terminal to-do manager."""

    TITLE = "Todo List - Login"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        settings: Settings | None = None,
        directory: CredentialDirectory | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings or Settings()
        # One directory for the whole process; sessions share it
        self.directory = directory or CredentialDirectory()
        self.current_user: str | None = None
        self.task_store: TaskStore | None = None

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen(LoginScreen())

    def start_session(self, username: str) -> TaskStore:
        """
        Begin a session for an authenticated user.

        Every session gets a fresh, empty TaskStore. Tasks are not kept
        per account, so logging in again starts from an empty list.
        """
        self.current_user = username
        self.task_store = TaskStore()
        self.title = f"Todo List - {username}"
        logger.info("Session started for %s", username)
        self.switch_screen(TaskScreen(self.task_store))
        return self.task_store


def run(settings: Settings | None = None) -> None:
    """Run the todolist application."""
    app = TodoApp(settings, CredentialDirectory())
    app.run()
