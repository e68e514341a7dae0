"""The single task manager screen: input, task rows and confirmations."""

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input

from task_state import (
    EDITING,
    PendingConfirmation,
    ScreenState,
    Transition,
    cancel_edit,
    initial_state,
    request_delete,
    request_delete_all,
    resolve_confirmation,
    set_draft,
    start_edit,
    submit_draft,
)
from tasks_tui.providers import TaskGateway
from tasks_tui.views.widgets import ConfirmDialog, SaveStatus, TaskListPanel, TaskRow

logger = logging.getLogger(__name__)


class TaskManagerScreen(Screen):
    """Owns the ScreenState, applies transitions and writes after each mutation."""

    BINDINGS = [
        Binding("escape", "cancel_edit", "Cancel Edit", show=True),
    ]

    DEFAULT_CSS = """
    TaskManagerScreen #editor {
        height: auto;
        padding: 1 1 0 1;
    }

    TaskManagerScreen #draft {
        margin-bottom: 1;
    }

    TaskManagerScreen #submit {
        width: 100%;
        margin-bottom: 1;
    }
    """

    def __init__(self, gateway: TaskGateway, notify_timeout: float = 2.0, **kwargs) -> None:
        super().__init__(**kwargs)
        self._gateway = gateway
        self._notify_timeout = notify_timeout
        self._state = ScreenState()

    @property
    def state(self) -> ScreenState:
        return self._state

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="editor"):
            yield Input(placeholder="Enter a new task", id="draft")
            yield Button("Add Task", id="submit", variant="primary")
        yield TaskListPanel(id="tasks")
        yield SaveStatus("", id="save-status", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        self._state = initial_state(self._gateway.load())
        self._sync_widgets()
        self.query_one("#draft", Input).focus()

    # -------------------- effects --------------------

    def _apply(self, transition: Transition) -> None:
        """Commit the new state, then write and notify as the transition asks."""
        self._state = transition.state

        if transition.persist:
            success, message = self._gateway.save(self._state.tasks)
            if not success:
                logger.warning("Keeping in-memory tasks after failed save: %s", message)
            self.query_one(SaveStatus).show_result(success, message)

        if transition.notice:
            self.app.notify(
                transition.notice.message,
                severity=transition.notice.severity,
                timeout=self._notify_timeout,
            )

        self._sync_widgets()

    def _sync_widgets(self) -> None:
        draft = self.query_one("#draft", Input)
        if draft.value != self._state.draft:
            with draft.prevent(Input.Changed):
                draft.value = self._state.draft

        editing = self._state.mode == EDITING
        self.query_one("#submit", Button).label = "Update Task" if editing else "Add Task"

        self.query_one(TaskListPanel).show(self._state.tasks, self._state.edit_index)

    def _has_task(self, index: int) -> bool:
        # Rows from before the last recompose may still post messages
        return 0 <= index < len(self._state.tasks)

    def _submit(self) -> None:
        value = self.query_one("#draft", Input).value
        self._state = set_draft(self._state, value).state
        self._apply(submit_draft(self._state))

    def _confirm(self, pending: PendingConfirmation | None) -> None:
        if pending is None:
            return

        def resolve(accepted: bool | None) -> None:
            self._apply(resolve_confirmation(self._state, pending, bool(accepted)))

        self.app.push_screen(ConfirmDialog(pending), resolve)

    # -------------------- event handlers --------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "draft":
            self._state = set_draft(self._state, event.value).state

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "draft":
            self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "submit":
            self._submit()
        elif event.button.id == "delete-all":
            self._confirm(request_delete_all(self._state))

    def on_task_row_edit_requested(self, message: TaskRow.EditRequested) -> None:
        if not self._has_task(message.index):
            return
        self._apply(start_edit(self._state, message.index))
        self.query_one("#draft", Input).focus()

    def on_task_row_delete_requested(self, message: TaskRow.DeleteRequested) -> None:
        if not self._has_task(message.index):
            return
        self._confirm(request_delete(self._state, message.index))

    def action_cancel_edit(self) -> None:
        self._apply(cancel_edit(self._state))
