"""
Session controller: routes key presses and ticks to the task store and
the pomodoro engine, and keeps the transient status message.

The controller knows nothing about the terminal. The textual app feeds it
KeyPress events and ticks, and renders the SessionView it produces.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from pomodoro import SelectedTaskScheduler, overview, start_pomodoro
from tasklist import TaskStore
from tui.providers import KeyPress, SessionView, TaskRepository, TaskView, TimerScheduler

logger = logging.getLogger(__name__)

# Seconds a status message stays visible
MESSAGE_VISIBLE_FOR = 4.0


class InputMode(Enum):
    IDLE = "idle"
    TASK_INPUT = "task"
    LANGUAGE_INPUT = "language"


@dataclass(frozen=True)
class StatusMessage:
    text: str
    set_at: float


class Session:
    """Owns the task store and the new-task wizard."""

    def __init__(
        self,
        repository: TaskRepository,
        scheduler: TimerScheduler | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._repository = repository
        self._scheduler = scheduler or SelectedTaskScheduler()
        self._clock = clock
        self.store = TaskStore(repository.load())
        self.input_mode = InputMode.IDLE
        self.task_buffer = ""
        self.language_buffer = ""
        self._status: StatusMessage | None = None

    # -------------------- status messages --------------------
    def set_status(self, text: str) -> None:
        self._status = StatusMessage(text, self._clock())

    def status_message(self) -> str | None:
        """Current message, or None once it has been visible long enough."""
        if self._status is not None:
            if self._clock() - self._status.set_at < MESSAGE_VISIBLE_FOR:
                return self._status.text
        self._status = None
        return None

    # -------------------- timer --------------------
    def tick(self) -> None:
        message = self._scheduler.advance(self.store, self._clock())
        if message:
            self.set_status(message)

    def start_timer(self) -> None:
        task = self.store.selected()
        if task is None:
            return
        self.set_status(start_pomodoro(task, self._clock()))

    # -------------------- task list --------------------
    def _persist(self) -> None:
        success, msg = self._repository.save(self.store.tasks)
        if not success:
            self.set_status(msg)

    def delete_selected(self) -> None:
        removed = self.store.remove(self.store.selected_index)
        if removed is None:
            return
        logger.info("Removed task %r", removed.name)
        self.set_status(f"Removed '{removed.name}'.")
        self._persist()

    def _clear_buffers(self) -> None:
        self.task_buffer = ""
        self.language_buffer = ""

    def _confirm(self) -> None:
        if self.input_mode == InputMode.TASK_INPUT:
            if self.task_buffer.strip():
                self.input_mode = InputMode.LANGUAGE_INPUT
        elif self.input_mode == InputMode.LANGUAGE_INPUT:
            task = self.store.add(self.task_buffer, self.language_buffer)
            if task is None:
                return
            logger.info("Added task %r (%s)", task.name, task.language)
            self._clear_buffers()
            self.input_mode = InputMode.IDLE
            self.set_status("New task added. Ready to focus!")
            self._persist()

    def _cancel(self) -> None:
        if self.input_mode == InputMode.IDLE:
            return
        self.input_mode = InputMode.IDLE
        self._clear_buffers()
        self.set_status("Creation cancelled.")

    def _type(self, character: str) -> None:
        if self.input_mode == InputMode.TASK_INPUT:
            self.task_buffer += character
        elif self.input_mode == InputMode.LANGUAGE_INPUT:
            self.language_buffer += character

    def paste(self, text: str) -> None:
        """Append pasted text to the active buffer, dropping control characters."""
        if self.input_mode == InputMode.IDLE:
            return
        for character in text:
            if character.isprintable():
                self._type(character)

    def _backspace(self) -> None:
        if self.input_mode == InputMode.TASK_INPUT:
            self.task_buffer = self.task_buffer[:-1]
        elif self.input_mode == InputMode.LANGUAGE_INPUT:
            self.language_buffer = self.language_buffer[:-1]

    # -------------------- key routing --------------------
    def handle_key(self, press: KeyPress) -> bool:
        """Apply one key press. Returns False when the user asked to quit."""
        typing = self.input_mode != InputMode.IDLE

        if press.key == "escape":
            self._cancel()
        elif typing and press.character is not None:
            self._type(press.character)
        elif press.key == "backspace":
            self._backspace()
        elif press.key == "enter":
            self._confirm()
        elif press.key == "delete":
            self.delete_selected()
        elif press.key == "up":
            self.store.move_selection(-1)
        elif press.key == "down":
            self.store.move_selection(1)
        elif typing:
            pass
        elif press.key == "q":
            return False
        elif press.key == "p":
            self.start_timer()
        elif press.key == "i":
            self.input_mode = InputMode.TASK_INPUT
        return True

    def snapshot(self) -> SessionView:
        """Build the view model. Reading it expires a stale status message."""
        return SessionView(
            tasks=tuple(TaskView.from_task(t) for t in self.store),
            selected_index=self.store.selected_index,
            input_mode=self.input_mode.value,
            task_buffer=self.task_buffer,
            language_buffer=self.language_buffer,
            pomodoro=overview(self.store.selected(), self._clock()),
            status_message=self.status_message(),
        )
