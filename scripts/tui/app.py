"""
Pomodoro To-Do TUI Application.

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

from logging_setup import setup_logging  # noqa: E402
from tui.providers import KeyPress  # noqa: E402
from tui.session import Session  # noqa: E402
from tui.state_provider import FileTaskRepository  # noqa: E402
from tui.views.dashboard import DashboardScreen  # noqa: E402

logger = logging.getLogger(__name__)

# Tick interval in seconds; also bounds timer resolution
TICK_INTERVAL = 0.1


class FocusApp(App):
    """Main Pomodoro To-Do application."""

    TITLE = "Pomodoro Control Center"
    SUB_TITLE = "Focus Mode"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(
        self,
        todo_file: Path | None = None,
        session: Session | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.session = session or Session(FileTaskRepository(todo_file))
        self._tick_timer = None

    async def on_mount(self) -> None:
        """Called when app is mounted."""
        await self.push_screen(DashboardScreen())
        self.render_session()
        self._tick_timer = self.set_interval(TICK_INTERVAL, self._on_tick)

    def _on_tick(self) -> None:
        self.session.tick()
        self.render_session()

    def render_session(self) -> None:
        """Push a fresh snapshot to the dashboard."""
        if isinstance(self.screen, DashboardScreen):
            self.screen.update_view(self.session.snapshot())

    def route_key(self, press: KeyPress) -> None:
        """Route a key press to the session; quit when it says so."""
        if not self.session.handle_key(press):
            logger.info("Quit requested")
            self.exit()
            return
        self.render_session()

    def route_paste(self, text: str) -> None:
        """Bracketed paste arrives as one event; feed it to the active buffer."""
        self.session.paste(text)
        self.render_session()


def run(todo_file: Path | None = None, log_dir: Path | None = None) -> None:
    """Run the TUI application."""
    setup_logging(log_dir=log_dir, console=False)
    app = FocusApp(todo_file=todo_file)
    app.run()


if __name__ == "__main__":
    run()
