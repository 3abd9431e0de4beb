"""
Task list for the Pomodoro to-do tracker.

Holds the Task record, the ordered TaskStore with its selection cursor,
and the line format used to persist tasks to a flat text file.

File format (UTF-8, one task per line, no header):
    name | language | completed_count

The completed_count field is optional on read so older two-field files
still load. Timer state is never written.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

TODO_FILE = Path("todo_list.txt")
SEP = " | "
DEFAULT_LANGUAGE = "Unknown"


class PomodoroState(Enum):
    IDLE = "idle"
    WORK = "work"
    BREAK = "break"


@dataclass
class Task:
    """A tracked task and the state of its pomodoro timer."""

    name: str
    language: str = DEFAULT_LANGUAGE
    state: PomodoroState = PomodoroState.IDLE
    timer_start: float | None = None
    completed_count: int = 0


class TaskStore:
    """Ordered tasks plus the index of the selected one."""

    def __init__(self, tasks: list[Task] | None = None):
        self.tasks: list[Task] = list(tasks or [])
        self.selected_index = 0

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self):
        return iter(self.tasks)

    def add(self, name: str, language: str) -> Task | None:
        """Append a new idle task.

        Returns None if either field is blank, or if the language contains
        the separator (it could not be read back).
        """
        name = name.strip()
        language = language.strip()
        if not name or not language or SEP in language:
            return None
        task = Task(name=name, language=language)
        self.tasks.append(task)
        return task

    def remove(self, index: int) -> Task | None:
        """Remove the task at index and keep the selection in range."""
        if not 0 <= index < len(self.tasks):
            return None
        removed = self.tasks.pop(index)
        if self.selected_index >= len(self.tasks) and self.selected_index > 0:
            self.selected_index -= 1
        return removed

    def move_selection(self, delta: int) -> None:
        if not self.tasks:
            return
        target = self.selected_index + delta
        self.selected_index = max(0, min(target, len(self.tasks) - 1))

    def selected(self) -> Task | None:
        if not self.tasks:
            return None
        return self.tasks[self.selected_index]


# =============================================================================
# Persistence
# =============================================================================


def parse_line(line: str) -> Task | None:
    """Parse one stored line. Blank lines and blank names yield None.

    Fields are taken from the right so a name containing the separator
    survives a save and reload.
    """
    line = line.rstrip()
    if not line.strip():
        return None

    parts = line.split(SEP)
    completed = 0
    if len(parts) == 1:
        name, language = parts[0], DEFAULT_LANGUAGE
    elif len(parts) == 2:
        name, language = parts
    else:
        try:
            completed = max(int(parts[-1]), 0)
        except ValueError:
            # Two-field line whose name contains the separator
            name, language = SEP.join(parts[:-1]), parts[-1]
        else:
            name, language = SEP.join(parts[:-2]), parts[-2]

    if not name.strip():
        logger.debug("Skipping task line with blank name: %r", line)
        return None

    return Task(name=name, language=language, completed_count=completed)


def format_line(task: Task) -> str:
    return SEP.join([task.name, task.language, str(task.completed_count)])


def load_tasks(path: Path | None = None) -> list[Task]:
    """Load tasks from file. A missing file is an empty list."""
    path = path or TODO_FILE
    if not path.exists():
        return []

    tasks = []
    for line in path.read_text(encoding="utf-8").splitlines():
        task = parse_line(line)
        if task is not None:
            tasks.append(task)
    return tasks


def save_tasks(tasks: list[Task], path: Path | None = None) -> tuple[bool, str]:
    """Rewrite the whole file with the given tasks."""
    path = path or TODO_FILE
    content = "".join(f"{format_line(task)}\n" for task in tasks)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.warning("Failed to save %d task(s) to %s: %s", len(tasks), path, e)
        return False, f"Could not save tasks: {e.strerror or e}"
    return True, f"Saved {len(tasks)} task(s)"
