"""
Task list state machine for the Daily Task Manager screen.

Every transition is a pure function taking the current ScreenState and
returning a Transition: the new state, an optional notice for the user,
and whether the full task list must be written back to the store. The
screen applies transitions and performs the writes; nothing here does I/O.

Destructive actions go through a two-step confirmation protocol:

    pending = request_delete(state, index)      # show a dialog for `pending`
    result = resolve_confirmation(state, pending, accepted)
"""

from __future__ import annotations

from dataclasses import dataclass, replace

IDLE = "idle"
COMPOSING = "composing"
EDITING = "editing"

DELETE_ONE = "delete"
DELETE_ALL = "delete-all"

MSG_EMPTY_DRAFT = "Please enter a task."
MSG_ADDED = "Task added successfully."
MSG_UPDATED = "Task updated successfully."
MSG_DELETED = "Task deleted successfully."
MSG_ALL_DELETED = "All tasks deleted successfully."


@dataclass(frozen=True)
class ScreenState:
    """Immutable snapshot of the screen: tasks, draft input and edit cursor."""

    tasks: tuple[str, ...] = ()
    draft: str = ""
    edit_index: int | None = None

    @property
    def mode(self) -> str:
        if self.edit_index is not None:
            return EDITING
        if self.draft:
            return COMPOSING
        return IDLE

    @property
    def can_delete_all(self) -> bool:
        return len(self.tasks) > 1


@dataclass(frozen=True)
class Notice:
    """Short-lived message shown to the user after a transition."""

    message: str
    severity: str = "information"


@dataclass(frozen=True)
class Transition:
    """Result of applying one event to a ScreenState."""

    state: ScreenState
    notice: Notice | None = None
    persist: bool = False


@dataclass(frozen=True)
class PendingConfirmation:
    """A destructive action waiting for the user's Cancel/OK decision."""

    action: str
    title: str
    prompt: str
    index: int | None = None
    task: str | None = None


def initial_state(tasks: list[str] | tuple[str, ...] = ()) -> ScreenState:
    """State at screen mount, seeded with the tasks loaded from the store."""
    return ScreenState(tasks=tuple(tasks))


def _check_index(state: ScreenState, index: int) -> None:
    if not 0 <= index < len(state.tasks):
        raise IndexError(f"No task at position {index} (have {len(state.tasks)})")


def set_draft(state: ScreenState, text: str) -> Transition:
    """User typed into the input field."""
    return Transition(replace(state, draft=text))


def start_edit(state: ScreenState, index: int) -> Transition:
    """Load the task at `index` into the draft and point the cursor at it."""
    _check_index(state, index)
    return Transition(replace(state, draft=state.tasks[index], edit_index=index))


def cancel_edit(state: ScreenState) -> Transition:
    """Leave edit mode without touching the task list."""
    if state.edit_index is None:
        return Transition(state)
    return Transition(replace(state, draft="", edit_index=None))


def submit_draft(state: ScreenState) -> Transition:
    """Add the draft as a new task, or replace the task under the cursor."""
    text = state.draft
    if not text:
        return Transition(state, Notice(MSG_EMPTY_DRAFT, "warning"))

    tasks = list(state.tasks)
    if state.edit_index is not None:
        tasks[state.edit_index] = text
        message = MSG_UPDATED
    else:
        tasks.append(text)
        message = MSG_ADDED

    return Transition(
        ScreenState(tasks=tuple(tasks)),
        Notice(message),
        persist=True,
    )


def request_delete(state: ScreenState, index: int) -> PendingConfirmation:
    """First step of deleting one task: describe what needs confirming."""
    _check_index(state, index)
    return PendingConfirmation(
        action=DELETE_ONE,
        title="Delete Task",
        prompt="Are you sure you want to delete this task?",
        index=index,
        task=state.tasks[index],
    )


def request_delete_all(state: ScreenState) -> PendingConfirmation | None:
    """First step of clearing the list. Only offered for more than one task."""
    if not state.can_delete_all:
        return None
    return PendingConfirmation(
        action=DELETE_ALL,
        title="Delete All Tasks",
        prompt="Are you sure you want to delete all tasks?",
    )


def _cursor_after_delete(edit_index: int | None, removed: int) -> int | None:
    if edit_index is None or edit_index == removed:
        return None
    if edit_index > removed:
        return edit_index - 1
    return edit_index


def resolve_confirmation(
    state: ScreenState, pending: PendingConfirmation, accepted: bool
) -> Transition:
    """Second step: apply the pending action if the user pressed OK."""
    if not accepted:
        return Transition(state)

    if pending.action == DELETE_ALL:
        return Transition(ScreenState(), Notice(MSG_ALL_DELETED), persist=True)

    if pending.action != DELETE_ONE:
        raise ValueError(f"Unknown confirmation action: {pending.action}")

    index = pending.index
    # The list may have changed while the dialog was open
    if index is None or not 0 <= index < len(state.tasks):
        return Transition(state)

    tasks = state.tasks[:index] + state.tasks[index + 1:]
    edit_index = _cursor_after_delete(state.edit_index, index)
    draft = state.draft
    if state.edit_index is not None and edit_index is None:
        draft = ""

    return Transition(
        ScreenState(tasks=tasks, draft=draft, edit_index=edit_index),
        Notice(MSG_DELETED),
        persist=True,
    )
