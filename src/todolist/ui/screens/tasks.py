"""Task list screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import (
    Button,
    Footer,
    Header,
    Input,
    Label,
    ListItem,
    ListView,
    Select,
    TextArea,
)

from ...errors import TaskNotFoundError, TodoError
from ...models import Priority, Task
from ...services import StoreChange, TaskStore
from ..widgets.error_modal import ErrorModal


class TaskScreen(Screen):
    """Search bar, task list and edit form for one session's TaskStore."""

    DEFAULT_CSS = """
    TaskScreen #search-section {
        height: auto;
        padding: 0 1;
    }

    TaskScreen #list-section {
        width: 1fr;
        padding: 0 1;
    }

    TaskScreen #form-section {
        width: 40;
        padding: 0 1;
    }

    TaskScreen #task-list {
        height: 1fr;
        border: solid $primary;
    }

    TaskScreen #description-input {
        height: 6;
    }

    TaskScreen .buttons {
        height: auto;
        margin-top: 1;
    }

    TaskScreen Button {
        margin-right: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+f", "focus_search", "Search", show=True),
        Binding("escape", "clear_form", "Clear", show=True),
    ]

    def __init__(self, store: TaskStore, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._store = store
        self._selected_id: int | None = None
        self._unsubscribe = None

    @property
    def store(self) -> TaskStore:
        return self._store

    @property
    def selected_id(self) -> int | None:
        """Id of the task loaded into the form, if any."""
        return self._selected_id

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="search-section"):
            yield Label("Search:")
            yield Input(placeholder="Search tasks...", id="search-input")
        with Horizontal():
            with Vertical(id="list-section"):
                yield Label("Tasks:")
                yield ListView(id="task-list")
            with Vertical(id="form-section"):
                yield Label("Title:")
                yield Input(placeholder="Task Title", id="title-input")
                yield Label("Description:")
                yield TextArea(id="description-input")
                yield Label("Priority:")
                yield Select(
                    [(p.label, p) for p in Priority],
                    prompt="Select Priority",
                    id="priority-select",
                )
                with Horizontal(classes="buttons"):
                    yield Button("Add Task", id="add", variant="primary")
                    yield Button("Update Task", id="update")
                    yield Button("Delete Task", id="delete", variant="error")
        yield Footer()

    def on_mount(self) -> None:
        self._unsubscribe = self._store.subscribe(self._on_store_change)
        self.render_tasks()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_store_change(self, change: StoreChange) -> None:
        """Re-render the list whenever the store changes.

        The selection is dropped once its row is no longer listed, so
        Update and Delete only ever act on a visible task.
        """
        if self._selected_id is not None and all(
            task.id != self._selected_id for task in self._store.filtered_view
        ):
            self._selected_id = None
        self.render_tasks()

    def render_tasks(self) -> None:
        """Rebuild the list from the store's filtered view."""
        list_view = self.query_one("#task-list", ListView)
        list_view.clear()
        for task in self._store.filtered_view:
            list_view.append(ListItem(Label(task.display_label), name=str(task.id)))

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search-input":
            self._store.set_search_term(event.value)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if event.item.name is not None:
            self.select_task(int(event.item.name))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "add":
            self.add_task(*self._read_form())
        elif button_id == "update":
            self.update_task(*self._read_form())
        elif button_id == "delete":
            self.delete_task()

    def select_task(self, task_id: int) -> Task | None:
        """Make a task the current selection and load it into the form."""
        try:
            task = self._store.get(task_id)
        except TaskNotFoundError:
            self._selected_id = None
            return None

        self._selected_id = task.id
        self._fill_form(task)
        return task

    def add_task(self, title: str, description: str, priority: Priority | None) -> Task | None:
        """Create a task from form values. Errors are shown, not raised."""
        try:
            task = self._store.add(title, description, priority)
        except TodoError as e:
            self.show_error(e.message)
            return None

        self.clear_form()
        return task

    def update_task(self, title: str, description: str, priority: Priority | None) -> Task | None:
        """Apply form values to the selected task. Errors are shown, not raised."""
        try:
            task = self._store.update(self._selected_id, title, description, priority)
        except TodoError as e:
            self.show_error(e.message)
            return None

        self.clear_form()
        return task

    def delete_task(self) -> Task | None:
        """Delete the selected task. Errors are shown, not raised."""
        try:
            task = self._store.remove(self._selected_id)
        except TodoError as e:
            self.show_error(e.message)
            return None

        self.clear_form()
        return task

    def show_error(self, message: str) -> None:
        self.app.push_screen(ErrorModal(message))

    def _read_form(self) -> tuple[str, str, Priority | None]:
        """Current (title, description, priority) from the form."""
        title = self.query_one("#title-input", Input).value
        description = self.query_one("#description-input", TextArea).text
        select = self.query_one("#priority-select", Select)
        priority = None if select.is_blank() else select.value
        return title, description, priority  # pyrefly: ignore[bad-return]

    def _fill_form(self, task: Task) -> None:
        self.query_one("#title-input", Input).value = task.title
        self.query_one("#description-input", TextArea).load_text(task.description)
        self.query_one("#priority-select", Select).value = task.priority

    def clear_form(self) -> None:
        """Empty the form and drop the selection."""
        self._selected_id = None
        self.query_one("#title-input", Input).value = ""
        self.query_one("#description-input", TextArea).load_text("")
        self.query_one("#priority-select", Select).clear()
        self.query_one("#task-list", ListView).index = None

    def action_clear_form(self) -> None:
        self.clear_form()

    def action_focus_search(self) -> None:
        self.query_one("#search-input", Input).focus()
