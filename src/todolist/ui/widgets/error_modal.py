"""Error alert modal dialog."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label


class ErrorModal(ModalScreen[None]):
    """Modal alert showing a single error message."""

    DEFAULT_CSS = """
    ErrorModal {
        align: center middle;
    }

    ErrorModal > Vertical {
        width: 50;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: solid $error;
    }

    ErrorModal .title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $error;
    }

    ErrorModal .message {
        width: 100%;
        text-align: center;
        margin: 1 0;
    }

    ErrorModal .buttons {
        width: 100%;
        height: auto;
        align: center middle;
    }
    """

    BINDINGS = [
        Binding("escape", "close", "Close"),
        Binding("enter", "close", "OK", show=False),
    ]

    def __init__(self, message: str, title: str = "Error") -> None:
        super().__init__()
        self.title_text = title
        self.message = message

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(self.title_text, classes="title")
            yield Label(self.message, classes="message")
            with Center(classes="buttons"):
                yield Button("OK", id="ok", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)
