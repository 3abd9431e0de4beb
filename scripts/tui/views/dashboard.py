"""Main dashboard view combining all panels."""

from textual import events
from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.screen import Screen
from textual.widgets import Header

from tui.providers import KeyPress, SessionView
from tui.views.widgets import (
    HeaderBanner,
    NewTaskPanel,
    PomodoroPanel,
    SessionOverviewPanel,
    TaskListPanel,
    TaskSnapshotPanel,
)


class DashboardScreen(Screen):
    """Main dashboard screen.

    Read-only over SessionView: every key press is handed to the app,
    which updates the session and calls update_view() with a fresh snapshot.
    """

    DEFAULT_CSS = """
    DashboardScreen {
        layout: grid;
        grid-size: 2 3;
        grid-columns: 2fr 3fr;
        grid-rows: auto 1fr auto;
    }

    #header-row {
        column-span: 2;
        height: 3;
    }

    #left-column {
        padding: 0 1;
    }

    #right-column {
        padding: 0 1;
    }

    #footer-row {
        column-span: 2;
        height: auto;
        padding: 0 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Header()

        with Container(id="header-row"):
            yield HeaderBanner()

        with Vertical(id="left-column"):
            yield TaskListPanel()

        with Vertical(id="right-column"):
            yield PomodoroPanel()
            yield SessionOverviewPanel()
            yield TaskSnapshotPanel()

        with Container(id="footer-row"):
            yield NewTaskPanel()

    def update_view(self, view: SessionView) -> None:
        """Render a session snapshot into every panel."""
        self.query_one(TaskListPanel).update_view(view)
        self.query_one(PomodoroPanel).update_view(view)
        self.query_one(SessionOverviewPanel).update_view(view)
        self.query_one(TaskSnapshotPanel).update_view(view)
        self.query_one(NewTaskPanel).update_view(view)

    def on_key(self, event: events.Key) -> None:
        character = event.character if event.is_printable else None
        event.stop()
        self.app.route_key(KeyPress(event.key, character))

    def on_paste(self, event: events.Paste) -> None:
        event.stop()
        self.app.route_paste(event.text)
