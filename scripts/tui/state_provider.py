"""
Concrete implementation of TaskRepository using the tasklist module.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Add scripts to path for imports
SCRIPT_DIR = Path(__file__).resolve().parent.parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from tasklist import TODO_FILE, Task, load_tasks, save_tasks  # noqa: E402

logger = logging.getLogger(__name__)


class FileTaskRepository:
    """TaskRepository implementation backed by todo_list.txt."""

    def __init__(self, todo_file: Path | None = None):
        self._todo_file = todo_file or TODO_FILE

    @property
    def path(self) -> Path:
        return self._todo_file

    def load(self) -> list[Task]:
        """Load tasks; an unreadable file is treated as empty."""
        try:
            tasks = load_tasks(self._todo_file)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s: %s", self._todo_file, e)
            return []
        logger.info("Loaded %d task(s) from %s", len(tasks), self._todo_file)
        return tasks

    def save(self, tasks: list[Task]) -> tuple[bool, str]:
        return save_tasks(tasks, self._todo_file)
