"""Login screen."""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, Label

from ...errors import InvalidArgumentError
from ..widgets.signup_modal import SignupModal

logger = logging.getLogger(__name__)


class LoginScreen(Screen):
    """Username/password form gating entry into a task session."""

    DEFAULT_CSS = """
    LoginScreen {
        align: center middle;
    }

    LoginScreen #login-form {
        width: 44;
        height: auto;
        padding: 1 2;
        border: solid $primary;
    }

    LoginScreen .heading {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    LoginScreen Input {
        margin-bottom: 1;
    }

    LoginScreen .buttons {
        width: 100%;
        height: auto;
        align: center middle;
    }

    LoginScreen Button {
        margin: 0 1;
    }

    LoginScreen #login-message {
        width: 100%;
        text-align: center;
        margin-top: 1;
        color: $error;
    }

    LoginScreen #login-message.-success {
        color: $success;
    }
    """

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="login-form"):
            yield Label("Todo List Login", classes="heading")
            yield Input(placeholder="Username", id="username")
            yield Input(placeholder="Password", password=True, id="password")
            with Horizontal(classes="buttons"):
                yield Button("Login", id="login", variant="primary")
                yield Button("Sign Up", id="signup")
            yield Label("", id="login-message")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#username", Input).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "login":
            self.submit_login()
        elif event.button.id == "signup":
            self.app.push_screen(SignupModal(), callback=self._handle_signup_result)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.submit_login()

    def submit_login(self) -> None:
        """Read the form and try to log in, showing any failure inline."""
        username = self.query_one("#username", Input).value
        password = self.query_one("#password", Input).value
        message = self.attempt_login(username, password)
        if message:
            self.show_message(message)

    def attempt_login(self, username: str, password: str) -> str | None:
        """
        Authenticate and start a session.

        Returns None on success, otherwise the message to display.
        """
        if not username or not password:
            return "Please fill in all fields"

        try:
            if not self.app.directory.authenticate(username, password):  # pyrefly: ignore[missing-attribute]
                return "Invalid username or password"
            self.app.start_session(username)  # pyrefly: ignore[missing-attribute]
        except Exception as e:
            logger.exception("Login failed for %s", username)
            return f"Login error: {e}"
        return None

    def register_account(self, username: str, password: str) -> tuple[str, bool]:
        """Register an account and return (message, created)."""
        try:
            created = self.app.directory.register(username, password)  # pyrefly: ignore[missing-attribute]
        except InvalidArgumentError as e:
            return e.message, False

        if created:
            return "Account created successfully!", True
        return "Username already exists", False

    def _handle_signup_result(self, result: tuple[str, str] | None) -> None:
        """Handle the sign-up modal result."""
        if result is None:
            return
        message, created = self.register_account(*result)
        self.show_message(message, success=created)

    def show_message(self, message: str, success: bool = False) -> None:
        """Show a status line under the form."""
        label = self.query_one("#login-message", Label)
        label.update(message)
        label.set_class(success, "-success")
