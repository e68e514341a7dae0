"""
Daily Task Manager TUI Application.

Main entry point for the terminal user interface.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure scripts directory is in path
SCRIPT_DIR = Path(__file__).resolve().parent.parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from textual.app import App  # noqa: E402
from textual.binding import Binding  # noqa: E402

from tasks_tui.providers import TaskGateway  # noqa: E402
from tasks_tui.views.task_screen import TaskManagerScreen  # noqa: E402

logger = logging.getLogger(__name__)

DARK_THEME = "textual-dark"
LIGHT_THEME = "textual-light"


class TaskManagerApp(App):
    """Main Daily Task Manager application."""

    TITLE = "Daily Task Manager"

    CSS = """
    Screen {
        background: $surface;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
        Binding("ctrl+t", "toggle_dark", "Dark/Light", show=True),
    ]

    def __init__(
        self,
        gateway: TaskGateway,
        notify_timeout: float = 2.0,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._gateway = gateway
        self._notify_timeout = notify_timeout

    def on_mount(self) -> None:
        """Called when app is mounted."""
        logger.info("Starting task manager")
        self.push_screen(TaskManagerScreen(self._gateway, self._notify_timeout))

    def action_toggle_dark(self) -> None:
        """Toggle dark mode."""
        self.theme = LIGHT_THEME if self.theme == DARK_THEME else DARK_THEME


def run(gateway: TaskGateway, notify_timeout: float = 2.0) -> None:
    """Run the TUI application."""
    app = TaskManagerApp(gateway, notify_timeout=notify_timeout)
    app.run()
