"""
Pomodoro timer state machine.

    IDLE  --start-->                      WORK   (clock restarts)
    WORK  --tick, elapsed >= 25 min-->    BREAK  (completed_count += 1)
    BREAK --tick, elapsed >= 5 min-->     IDLE   (clock cleared)

Times are monotonic clock readings in seconds. Only one task is advanced
per tick; which one is decided by the scheduler.
"""

import logging
from dataclasses import dataclass

from tasklist import PomodoroState, Task, TaskStore

logger = logging.getLogger(__name__)

WORK_DURATION = 25 * 60.0
BREAK_DURATION = 5 * 60.0

PHASES = {
    PomodoroState.WORK: ("Focus", WORK_DURATION, "focus"),
    PomodoroState.BREAK: ("Break", BREAK_DURATION, "break"),
}


@dataclass(frozen=True)
class PomodoroOverview:
    """Read-only projection of the selected task's timer."""

    phase: PomodoroState | None
    label: str
    remaining: float
    progress: float
    color: str

    @property
    def text(self) -> str:
        if self.phase not in PHASES:
            return self.label
        seconds = int(self.remaining)
        return f"{self.label} · {seconds // 60:02d}:{seconds % 60:02d} left"


def start_pomodoro(task: Task, now: float) -> str:
    """Put the task into WORK, restarting the clock if it was already running."""
    task.state = PomodoroState.WORK
    task.timer_start = now
    logger.info("Started focus on %r", task.name)
    return f"Started focus on '{task.name}'. Stay sharp!"


def tick(task: Task, now: float) -> str | None:
    """Advance the task's timer. Returns a status message on a transition."""
    if task.timer_start is None:
        return None

    elapsed = now - task.timer_start

    if task.state == PomodoroState.WORK and elapsed >= WORK_DURATION:
        task.state = PomodoroState.BREAK
        task.timer_start = now
        task.completed_count += 1
        logger.info("Work session done for %r (%d completed)", task.name, task.completed_count)
        return f"Work session done! Take a break, {task.name}."

    if task.state == PomodoroState.BREAK and elapsed >= BREAK_DURATION:
        task.state = PomodoroState.IDLE
        task.timer_start = None
        logger.info("Break finished for %r", task.name)
        return "Break finished. Ready for another round?"

    return None


def overview(task: Task | None, now: float) -> PomodoroOverview:
    if task is None:
        return PomodoroOverview(None, "No tasks available", 0.0, 0.0, "none")

    if task.timer_start is None or task.state not in PHASES:
        return PomodoroOverview(
            PomodoroState.IDLE,
            "Press 'p' to start the pomodoro for this task.",
            0.0,
            0.0,
            "idle",
        )

    label, duration, color = PHASES[task.state]
    elapsed = max(now - task.timer_start, 0.0)
    remaining = max(duration - elapsed, 0.0)
    progress = min(elapsed / duration, 1.0)
    return PomodoroOverview(task.state, label, remaining, progress, color)


class SelectedTaskScheduler:
    """Advances only the selected task's timer."""

    def advance(self, store: TaskStore, now: float) -> str | None:
        task = store.selected()
        if task is None:
            return None
        return tick(task, now)
