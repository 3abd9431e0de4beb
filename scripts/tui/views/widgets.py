"""Reusable widgets for the TUI dashboard."""

from rich.text import Text
from textual.app import ComposeResult
from textual.widgets import Label, ProgressBar, Static

from tasklist import PomodoroState
from tui.providers import SessionView, TaskView

STATE_DISPLAY = {
    PomodoroState.IDLE: ("Idle", "grey62"),
    PomodoroState.WORK: ("Focus", "green1"),
    PomodoroState.BREAK: ("Break", "sky_blue1"),
}

INPUT_TITLES = {
    "task": "New Task (Task Input Mode)",
    "language": "New Task (Language Input Mode)",
    "idle": "New Task (Press 'i' to add)",
}

CONTROLS = "i=add task  ↑/↓=navigate  p=start timer  del=remove  q=quit"


class HeaderBanner(Static):
    """Application banner."""

    DEFAULT_CSS = """
    HeaderBanner {
        height: 3;
        border: solid $accent;
        padding: 0 1;
    }

    HeaderBanner .banner {
        text-style: bold;
        color: $accent;
    }
    """

    def compose(self) -> ComposeResult:
        yield Label(
            "⚡ Pomodoro Control Center  [dim]Stay focused and track your progress[/dim]",
            classes="banner",
        )


class TaskListPanel(Static):
    """List of tasks with the selected one highlighted."""

    DEFAULT_CSS = """
    TaskListPanel {
        height: 100%;
        border: solid $primary;
        padding: 1;
    }

    TaskListPanel .title {
        text-style: bold;
        margin-bottom: 1;
    }

    TaskListPanel #task-lines {
        height: 1fr;
        overflow-y: auto;
    }
    """

    def compose(self) -> ComposeResult:
        yield Label("To-Do List", classes="title")
        yield Static(id="task-lines")

    @staticmethod
    def render_task(task: TaskView, selected: bool) -> Text:
        label, color = STATE_DISPLAY[task.state]
        primary_style = "bold yellow" if selected else ""
        marker = "▶ " if selected else "  "

        text = Text()
        text.append(f"{marker}{task.name} · {task.language}\n", style=primary_style)
        text.append(f"  Status: {label} | Completed: {task.completed_count}", style=color)
        return text

    def update_view(self, view: SessionView) -> None:
        body = self.query_one("#task-lines", Static)
        if not view.tasks:
            body.update(Text("No tasks yet", style="dim"))
            return
        lines = [
            self.render_task(task, i == view.selected_index)
            for i, task in enumerate(view.tasks)
        ]
        body.update(Text("\n").join(lines))


class PomodoroPanel(Static):
    """Gauge for the selected task's pomodoro."""

    DEFAULT_CSS = """
    PomodoroPanel {
        height: auto;
        border: solid $primary;
        padding: 0 1;
        margin-bottom: 1;
    }

    PomodoroPanel .title {
        text-style: bold;
    }

    PomodoroPanel .phase-focus {
        color: $success;
        text-style: bold;
    }

    PomodoroPanel .phase-break {
        color: $accent;
        text-style: bold;
    }

    PomodoroPanel .phase-idle {
        color: $text-muted;
    }

    PomodoroPanel .phase-none {
        color: $text-muted;
    }
    """

    def compose(self) -> ComposeResult:
        yield Label("Pomodoro Progress", classes="title")
        yield Label("", id="phase-label", classes="phase-none")
        yield ProgressBar(total=100, show_eta=False, id="phase-bar")

    def update_view(self, view: SessionView) -> None:
        pomodoro = view.pomodoro
        label = self.query_one("#phase-label", Label)
        label.update(Text(pomodoro.text))
        label.set_classes(f"phase-{pomodoro.color}")
        self.query_one("#phase-bar", ProgressBar).update(
            progress=pomodoro.progress * 100
        )


class SessionOverviewPanel(Static):
    """Key help and the transient status message."""

    DEFAULT_CSS = """
    SessionOverviewPanel {
        height: auto;
        border: solid $primary;
        padding: 0 1;
        margin-bottom: 1;
    }

    SessionOverviewPanel .title {
        text-style: bold;
        color: $warning;
    }

    SessionOverviewPanel #status-message {
        color: $accent;
        text-style: italic;
    }
    """

    def compose(self) -> ComposeResult:
        yield Label(f"[b]Controls:[/b]  {CONTROLS}", classes="title")
        yield Label("", id="status-message")

    def update_view(self, view: SessionView) -> None:
        self.query_one("#status-message", Label).update(
            Text(view.status_message or "")
        )


class TaskSnapshotPanel(Static):
    """Details of the selected task."""

    DEFAULT_CSS = """
    TaskSnapshotPanel {
        height: 1fr;
        border: solid $primary;
        padding: 0 1;
    }

    TaskSnapshotPanel .title {
        text-style: bold;
    }
    """

    def compose(self) -> ComposeResult:
        yield Label("Selected Task: (press p to begin)", classes="title")
        yield Label("", id="snapshot-line")

    def update_view(self, view: SessionView) -> None:
        task = view.selected
        if task is None:
            line = "No task selected"
        else:
            line = (
                f"{task.name} | {task.language} | "
                f"Completed focus sessions: {task.completed_count}"
            )
        self.query_one("#snapshot-line", Label).update(Text(line))


class NewTaskPanel(Static):
    """Text entry for the new-task wizard."""

    DEFAULT_CSS = """
    NewTaskPanel {
        height: auto;
        border: solid $warning;
        padding: 0 1;
        color: $warning;
    }

    NewTaskPanel .title {
        text-style: bold;
    }

    NewTaskPanel .hint {
        color: $text-muted;
    }
    """

    def compose(self) -> ComposeResult:
        yield Label(INPUT_TITLES["idle"], id="input-title", classes="title")
        yield Label("", id="task-input")
        yield Label("", id="language-input")
        yield Label("Enter to confirm, ESC to cancel", classes="hint")

    def update_view(self, view: SessionView) -> None:
        self.query_one("#input-title", Label).update(INPUT_TITLES[view.input_mode])

        task_line = Text("Task:", style="bold")
        task_line.append(f" {view.task_buffer}", style="")
        lang_line = Text("Language:", style="bold")
        lang_line.append(f" {view.language_buffer}", style="")

        self.query_one("#task-input", Label).update(task_line)
        self.query_one("#language-input", Label).update(lang_line)
