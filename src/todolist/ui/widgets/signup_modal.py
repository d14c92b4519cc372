"""Sign-up modal dialog."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label


class SignupModal(ModalScreen[tuple[str, str] | None]):
    """Modal dialog asking for a new username and password.

    Dismisses with (username, password) on OK, or None on cancel. The
    values are not validated here; registration does that.
    """

    DEFAULT_CSS = """
    SignupModal {
        align: center middle;
    }

    SignupModal > Vertical {
        width: 50;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    SignupModal .header {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    SignupModal Input {
        margin-bottom: 1;
    }

    SignupModal .buttons {
        width: 100%;
        height: auto;
        align: center middle;
    }

    SignupModal Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label("Create new account", classes="header")
            yield Label("Username:")
            yield Input(placeholder="Username", id="signup-username")
            yield Label("Password:")
            yield Input(placeholder="Password", password=True, id="signup-password")
            with Center(classes="buttons"):
                yield Button("OK", id="ok", variant="primary")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#signup-username", Input).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "ok":
            self.action_submit()
        else:
            self.action_cancel()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.action_submit()

    def action_submit(self) -> None:
        username = self.query_one("#signup-username", Input).value
        password = self.query_one("#signup-password", Input).value
        self.dismiss((username, password))

    def action_cancel(self) -> None:
        self.dismiss(None)
