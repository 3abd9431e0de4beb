#!/usr/bin/env python3
"""
Pomodoro To-Do

Terminal task list with a 25/5 minute pomodoro timer per task.

Usage:
    focus.py                       Launch interactive TUI
    focus.py --once                Print the task list once and exit (no TUI)
    focus.py --json                Print the task list as JSON and exit
    focus.py --todo-file PATH      Use another task file (default: todo_list.txt)

Requirements:
    pip install textual
"""

import argparse
import json
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from logging_setup import setup_logging  # noqa: E402
from tui.state_provider import FileTaskRepository  # noqa: E402


def print_tasks_once(todo_file: Path | None = None) -> int:
    """Print the task list and exit."""
    repository = FileTaskRepository(todo_file)
    tasks = repository.load()

    if not tasks:
        print(f"No tasks found in {repository.path}.")
        print("Launch the TUI and press 'i' to add one.")
        return 0

    print(f"Tasks ({len(tasks)}):")
    for i, task in enumerate(tasks, 1):
        print(f"  {i}. {task.name} · {task.language}  ({task.completed_count} completed)")
    print()

    total = sum(t.completed_count for t in tasks)
    print(f"Completed focus sessions: {total}")

    by_language: dict[str, int] = {}
    for task in tasks:
        by_language[task.language] = by_language.get(task.language, 0) + task.completed_count
    if total > 0:
        print("By language:")
        for language, count in sorted(by_language.items(), key=lambda kv: (-kv[1], kv[0])):
            if count > 0:
                print(f"  {language}: {count}")

    return 0


def print_tasks_json(todo_file: Path | None = None) -> int:
    """Print the task list as JSON and exit."""
    tasks = FileTaskRepository(todo_file).load()

    output = {
        "tasks": [
            {
                "name": t.name,
                "language": t.language,
                "completed_count": t.completed_count,
            }
            for t in tasks
        ],
        "total_tasks": len(tasks),
        "total_completed": sum(t.completed_count for t in tasks),
    }

    print(json.dumps(output, indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Pomodoro To-Do",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Print the task list once and exit (no TUI)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the task list as JSON and exit",
    )
    parser.add_argument(
        "--todo-file",
        type=Path,
        help="Path to the task file (default: todo_list.txt)",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Directory for focus.log (default: .local/focus)",
    )

    args = parser.parse_args(argv)

    if args.json or args.once:
        setup_logging(log_dir=args.log_dir)
        if args.json:
            return print_tasks_json(args.todo_file)
        return print_tasks_once(args.todo_file)

    # Launch TUI
    try:
        from tui.app import run
    except ImportError as e:
        print(f"TUI requires textual: {e}")
        print("Install with: pip install textual")
        print()
        print("Falling back to --once mode:")
        print()
        return print_tasks_once(args.todo_file)

    run(todo_file=args.todo_file, log_dir=args.log_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
