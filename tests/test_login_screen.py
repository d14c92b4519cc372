"""Tests for LoginScreen action handlers.

The handlers are exercised without running the Textual app: the app is
replaced by a mock exposing a real CredentialDirectory.
"""

from unittest.mock import MagicMock, PropertyMock, patch

import pytest

from todolist.services import CredentialDirectory
from todolist.ui.screens.login import LoginScreen


@pytest.fixture
def mock_app() -> MagicMock:
    app = MagicMock()
    app.directory = CredentialDirectory()
    return app


@pytest.fixture
def screen(mock_app: MagicMock):
    screen = LoginScreen.__new__(LoginScreen)
    screen.show_message = MagicMock()
    with patch.object(LoginScreen, "app", new_callable=PropertyMock, return_value=mock_app):
        yield screen


class TestAttemptLogin:
    """Tests for login handling."""

    def test_empty_fields(self, screen: LoginScreen, mock_app: MagicMock):
        assert screen.attempt_login("", "pw") == "Please fill in all fields"
        assert screen.attempt_login("admin", "") == "Please fill in all fields"
        mock_app.start_session.assert_not_called()

    def test_invalid_credentials(self, screen: LoginScreen, mock_app: MagicMock):
        assert screen.attempt_login("admin", "nope") == "Invalid username or password"
        mock_app.start_session.assert_not_called()

    def test_success_starts_session(self, screen: LoginScreen, mock_app: MagicMock):
        assert screen.attempt_login("admin", "admin123") is None
        mock_app.start_session.assert_called_once_with("admin")

    def test_unexpected_error_reported(self, screen: LoginScreen, mock_app: MagicMock):
        mock_app.start_session.side_effect = RuntimeError("boom")
        assert screen.attempt_login("admin", "admin123") == "Login error: boom"


class TestRegisterAccount:
    """Tests for sign-up handling."""

    def test_created(self, screen: LoginScreen, mock_app: MagicMock):
        assert screen.register_account("alice", "pw") == ("Account created successfully!", True)
        assert mock_app.directory.authenticate("alice", "pw")

    def test_existing(self, screen: LoginScreen):
        assert screen.register_account("admin", "x") == ("Username already exists", False)

    def test_empty(self, screen: LoginScreen):
        assert screen.register_account("", "pw") == (
            "Username and password cannot be empty",
            False,
        )

    def test_signup_result_shows_message(self, screen: LoginScreen):
        screen._handle_signup_result(("alice", "pw"))
        screen.show_message.assert_called_once_with("Account created successfully!", success=True)

    def test_signup_cancelled(self, screen: LoginScreen):
        screen._handle_signup_result(None)
        screen.show_message.assert_not_called()
