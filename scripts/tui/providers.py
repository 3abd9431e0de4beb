"""
Data providers for the TUI.

Protocols define the interface; implementations can be swapped
for testing or alternative data sources.
"""

from dataclasses import dataclass
from typing import Protocol

from pomodoro import PomodoroOverview
from tasklist import PomodoroState, Task, TaskStore


@dataclass(frozen=True)
class KeyPress:
    """A discrete key event, independent of the terminal library.

    ``key`` uses textual's key names ("up", "delete", "enter", "q", ...).
    ``character`` is set only for printable input.
    """

    key: str
    character: str | None = None


@dataclass(frozen=True)
class TaskView:
    """Immutable snapshot of a task for rendering."""

    name: str
    language: str
    state: PomodoroState
    completed_count: int

    @classmethod
    def from_task(cls, task: Task) -> "TaskView":
        return cls(task.name, task.language, task.state, task.completed_count)


@dataclass(frozen=True)
class SessionView:
    """Complete session snapshot handed to the dashboard."""

    tasks: tuple[TaskView, ...]
    selected_index: int
    input_mode: str
    task_buffer: str
    language_buffer: str
    pomodoro: PomodoroOverview
    status_message: str | None = None

    @property
    def selected(self) -> TaskView | None:
        if not self.tasks:
            return None
        return self.tasks[self.selected_index]


class TaskRepository(Protocol):
    """Protocol for loading and saving the task list."""

    def load(self) -> list[Task]:
        """Load all tasks. Timer state always starts idle."""
        ...

    def save(self, tasks: list[Task]) -> tuple[bool, str]:
        """Replace the stored tasks."""
        ...


class TimerScheduler(Protocol):
    """Protocol for advancing pomodoro timers once per tick."""

    def advance(self, store: TaskStore, now: float) -> str | None:
        """Advance timers; return a status message if a phase changed."""
        ...
