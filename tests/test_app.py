"""Tests for TodoApp session wiring."""

from unittest.mock import MagicMock, PropertyMock, patch

from todolist.app import TodoApp
from todolist.services import CredentialDirectory, TaskStore


def make_app(directory: CredentialDirectory | None = None) -> TodoApp:
    """Build an app without running Textual's App.__init__."""
    app = TodoApp.__new__(TodoApp)
    app.directory = directory or CredentialDirectory()
    app.current_user = None
    app.task_store = None
    app.switch_screen = MagicMock()
    return app


class TestStartSession:
    """Tests for starting a task session after login."""

    def test_start_session_sets_user_and_title(self):
        app = make_app()

        with (
            patch.object(TodoApp, "title", new_callable=PropertyMock) as mock_title,
            patch("todolist.app.TaskScreen") as mock_screen_cls,
        ):
            store = app.start_session("admin")

        assert isinstance(store, TaskStore)
        assert app.current_user == "admin"
        assert app.task_store is store
        mock_title.assert_called_once_with("Todo List - admin")
        mock_screen_cls.assert_called_once_with(store)
        app.switch_screen.assert_called_once_with(mock_screen_cls.return_value)

    def test_each_session_gets_fresh_store(self):
        """Tasks are not carried between logins."""
        app = make_app()

        with (
            patch.object(TodoApp, "title", new_callable=PropertyMock),
            patch("todolist.app.TaskScreen"),
        ):
            first = app.start_session("admin")
            first.add("Leftover", "", "low")
            second = app.start_session("test")

        assert second is not first
        assert len(second) == 0

    def test_directory_shared_across_sessions(self):
        """The same directory instance serves every session."""
        directory = CredentialDirectory()
        app = make_app(directory)

        with (
            patch.object(TodoApp, "title", new_callable=PropertyMock),
            patch("todolist.app.TaskScreen"),
        ):
            app.start_session("admin")
            app.start_session("test")

        assert app.directory is directory
        assert app.current_user == "test"
