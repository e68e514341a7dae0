"""Reusable widgets for the task manager screen."""

from textual.app import ComposeResult
from textual.containers import Grid, VerticalScroll
from textual.message import Message
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Static

from task_state import PendingConfirmation


class TaskRow(Static):
    """Single task with its Update and Delete buttons."""

    DEFAULT_CSS = """
    TaskRow {
        height: auto;
        layout: horizontal;
        background: $boost;
        padding: 0 1;
        margin-bottom: 1;
    }

    TaskRow.editing {
        border-left: thick $accent;
    }

    TaskRow .task-text {
        width: 1fr;
        padding: 1 0;
    }

    TaskRow Button {
        min-width: 10;
        margin-left: 1;
    }
    """

    class EditRequested(Message):
        """The user pressed Update on a row."""

        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    class DeleteRequested(Message):
        """The user pressed Delete on a row."""

        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    def __init__(self, index: int, text: str, editing: bool = False, **kwargs) -> None:
        super().__init__(**kwargs)
        self._index = index
        self._text = text
        if editing:
            self.add_class("editing")

    @property
    def index(self) -> int:
        return self._index

    def compose(self) -> ComposeResult:
        yield Label(self._text, classes="task-text", markup=False)
        yield Button("Update", id=f"edit-{self._index}", classes="edit")
        yield Button("Delete", id=f"delete-{self._index}", variant="error", classes="delete")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.has_class("edit"):
            self.post_message(self.EditRequested(self._index))
        else:
            self.post_message(self.DeleteRequested(self._index))


class TaskListPanel(Static):
    """Scrollable list of task rows plus the Delete All button."""

    DEFAULT_CSS = """
    TaskListPanel {
        height: 1fr;
        padding: 0 1;
    }

    TaskListPanel .task-list {
        height: 1fr;
    }

    TaskListPanel .empty {
        color: $text-muted;
        margin: 1 0;
    }

    TaskListPanel #delete-all {
        width: 100%;
        margin-top: 1;
    }
    """

    tasks: reactive[tuple[str, ...]] = reactive(())
    edit_index: reactive[int | None] = reactive(None)

    def __init__(
        self,
        tasks: tuple[str, ...] = (),
        edit_index: int | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.set_reactive(TaskListPanel.tasks, tasks)
        self.set_reactive(TaskListPanel.edit_index, edit_index)

    def show(self, tasks: tuple[str, ...], edit_index: int | None) -> None:
        """Replace rows and cursor together so the list recomposes once."""
        if tasks == self.tasks and edit_index == self.edit_index:
            return
        self.set_reactive(TaskListPanel.tasks, tasks)
        self.set_reactive(TaskListPanel.edit_index, edit_index)
        self.refresh(recompose=True)

    def compose(self) -> ComposeResult:
        with VerticalScroll(classes="task-list"):
            if not self.tasks:
                yield Label("No tasks yet", classes="empty")
            for index, text in enumerate(self.tasks):
                yield TaskRow(index, text, editing=index == self.edit_index)

        if len(self.tasks) > 1:
            yield Button("Delete All Tasks", id="delete-all", variant="error")


class SaveStatus(Label):
    """One-line indicator of the last save; never blocks the user."""

    DEFAULT_CSS = """
    SaveStatus {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }

    SaveStatus.failed {
        color: $error;
    }
    """

    status_text = ""

    def show_result(self, success: bool, message: str) -> None:
        self.status_text = message if success else f"Not saved: {message}"
        self.set_class(not success, "failed")
        self.update(self.status_text)


class ConfirmDialog(ModalScreen[bool]):
    """Blocking Cancel/OK prompt for a pending destructive action."""

    DEFAULT_CSS = """
    ConfirmDialog {
        align: center middle;
    }

    ConfirmDialog > Grid {
        grid-size: 2;
        grid-gutter: 1 2;
        grid-rows: auto auto 3;
        padding: 1 2;
        width: 60;
        height: auto;
        border: thick $error 80%;
        background: $surface;
    }

    ConfirmDialog .title {
        column-span: 2;
        text-style: bold;
    }

    ConfirmDialog .prompt {
        column-span: 2;
        width: 100%;
    }

    ConfirmDialog Button {
        width: 100%;
    }
    """

    def __init__(self, pending: PendingConfirmation, **kwargs) -> None:
        super().__init__(**kwargs)
        self._pending = pending

    @property
    def pending(self) -> PendingConfirmation:
        return self._pending

    def compose(self) -> ComposeResult:
        prompt = self._pending.prompt
        if self._pending.task is not None:
            prompt = f"{prompt}\n\n{self._pending.task}"
        with Grid():
            yield Label(self._pending.title, classes="title")
            yield Label(prompt, classes="prompt", markup=False)
            yield Button("Cancel", id="confirm-cancel")
            yield Button("OK", id="confirm-ok", variant="error")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(event.button.id == "confirm-ok")
