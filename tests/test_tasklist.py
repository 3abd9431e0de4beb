"""Tests for tasklist.py - task store and line-format persistence."""

import sys
from pathlib import Path

import pytest

# Add scripts to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from tasklist import (
    PomodoroState,
    Task,
    TaskStore,
    format_line,
    load_tasks,
    parse_line,
    save_tasks,
)


@pytest.fixture
def store() -> TaskStore:
    """Store with three idle tasks."""
    return TaskStore(
        [
            Task("Write spec", "Rust"),
            Task("Review PR", "Go"),
            Task("Fix flaky test", "Python"),
        ]
    )


class TestAdd:
    """Tests for TaskStore.add."""

    def test_appends_idle_task(self, store: TaskStore) -> None:
        task = store.add("Refactor parser", "Python")

        assert task is not None
        assert store.tasks[-1] is task
        assert task.state == PomodoroState.IDLE
        assert task.timer_start is None
        assert task.completed_count == 0

    def test_trims_fields(self) -> None:
        store = TaskStore()
        task = store.add("  Deploy  ", " Bash ")

        assert task.name == "Deploy"
        assert task.language == "Bash"

    @pytest.mark.parametrize("name, language", [("", "Go"), ("   ", "Go"), ("Task", ""), ("Task", "  ")])
    def test_rejects_blank_fields(self, name: str, language: str) -> None:
        store = TaskStore()

        assert store.add(name, language) is None
        assert len(store) == 0

    def test_rejects_separator_in_language(self) -> None:
        store = TaskStore()

        assert store.add("Port", "C | C++") is None
        assert len(store) == 0

    def test_allows_separator_in_name(self) -> None:
        store = TaskStore()

        assert store.add("a | b", "Rust").name == "a | b"


class TestRemove:
    """Tests for TaskStore.remove."""

    def test_remove_on_empty_store_is_noop(self) -> None:
        store = TaskStore()

        assert store.remove(0) is None
        assert store.selected_index == 0

    def test_preserves_order_of_remaining(self, store: TaskStore) -> None:
        removed = store.remove(1)

        assert removed.name == "Review PR"
        assert [t.name for t in store] == ["Write spec", "Fix flaky test"]

    def test_removing_last_selected_moves_selection_up(self, store: TaskStore) -> None:
        store.selected_index = 2
        store.remove(2)

        assert store.selected_index == 1

    def test_removing_middle_keeps_index(self, store: TaskStore) -> None:
        store.selected_index = 1
        store.remove(1)

        assert store.selected_index == 1
        assert store.selected().name == "Fix flaky test"

    def test_removing_only_task_leaves_index_zero(self) -> None:
        store = TaskStore([Task("Solo", "C")])
        store.remove(0)

        assert len(store) == 0
        assert store.selected_index == 0
        assert store.selected() is None

    def test_selection_stays_valid_after_repeated_removal(self, store: TaskStore) -> None:
        store.selected_index = 2
        while len(store):
            store.remove(store.selected_index)
            assert len(store) == 0 or store.selected_index < len(store)


class TestMoveSelection:
    """Tests for TaskStore.move_selection."""

    def test_moves_down_and_up(self, store: TaskStore) -> None:
        store.move_selection(1)
        assert store.selected_index == 1

        store.move_selection(-1)
        assert store.selected_index == 0

    def test_clamps_at_top(self, store: TaskStore) -> None:
        store.move_selection(-1)

        assert store.selected_index == 0

    def test_clamps_at_bottom(self, store: TaskStore) -> None:
        store.selected_index = 2
        store.move_selection(1)

        assert store.selected_index == 2

    def test_empty_store(self) -> None:
        store = TaskStore()
        store.move_selection(1)

        assert store.selected_index == 0
        assert store.selected() is None


class TestParseLine:
    """Tests for parse_line."""

    def test_three_fields(self) -> None:
        task = parse_line("Write spec | Rust | 3")

        assert task.name == "Write spec"
        assert task.language == "Rust"
        assert task.completed_count == 3

    def test_two_fields_defaults_count(self) -> None:
        task = parse_line("Review PR | Go")

        assert task.language == "Go"
        assert task.completed_count == 0

    def test_name_only_defaults_language(self) -> None:
        task = parse_line("Lonely task")

        assert task.name == "Lonely task"
        assert task.language == "Unknown"

    def test_unparseable_count(self) -> None:
        assert parse_line("A | B | lots").completed_count == 0

    def test_negative_count(self) -> None:
        assert parse_line("A | B | -2").completed_count == 0

    def test_trailing_whitespace_trimmed(self) -> None:
        task = parse_line("A | B | 4  \r\n")

        assert task.completed_count == 4

    def test_blank_line(self) -> None:
        assert parse_line("   \n") is None

    @pytest.mark.parametrize("line", [" | Rust | 2", "   | Go", " "])
    def test_blank_name_is_skipped(self, line: str) -> None:
        assert parse_line(line) is None

    def test_name_containing_separator(self) -> None:
        task = parse_line("a | b | Rust | 2")

        assert (task.name, task.language, task.completed_count) == ("a | b", "Rust", 2)

    def test_two_field_name_containing_separator(self) -> None:
        task = parse_line("a | b | Rust")

        assert (task.name, task.language, task.completed_count) == ("a | b", "Rust", 0)

    def test_loaded_tasks_are_idle(self) -> None:
        task = parse_line("A | B | 1")

        assert task.state == PomodoroState.IDLE
        assert task.timer_start is None


class TestFormatLine:
    """Tests for format_line."""

    def test_writes_three_fields(self) -> None:
        assert format_line(Task("Ship it", "Rust", completed_count=7)) == "Ship it | Rust | 7"


class TestLoadSave:
    """Tests for load_tasks and save_tasks."""

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert load_tasks(tmp_path / "nope.txt") == []

    def test_loads_mixed_formats(self, tmp_path: Path) -> None:
        path = tmp_path / "todo_list.txt"
        path.write_text("Write spec | Rust | 3\nReview PR | Go\n", encoding="utf-8")

        tasks = load_tasks(path)

        assert len(tasks) == 2
        assert tasks[0].completed_count == 3
        assert tasks[1].completed_count == 0
        assert tasks[1].language == "Go"

    def test_round_trip_resets_timer_state(self, tmp_path: Path) -> None:
        path = tmp_path / "todo_list.txt"
        tasks = [
            Task("Write spec", "Rust", PomodoroState.WORK, 100.0, 3),
            Task("Review PR", "Go", PomodoroState.BREAK, 50.0, 1),
            Task("Café notes", "Français"),
        ]

        success, _ = save_tasks(tasks, path)
        loaded = load_tasks(path)

        assert success
        assert [(t.name, t.language, t.completed_count) for t in loaded] == [
            ("Write spec", "Rust", 3),
            ("Review PR", "Go", 1),
            ("Café notes", "Français", 0),
        ]
        assert all(t.state == PomodoroState.IDLE for t in loaded)
        assert all(t.timer_start is None for t in loaded)

    def test_round_trip_name_containing_separator(self, tmp_path: Path) -> None:
        path = tmp_path / "todo_list.txt"
        store = TaskStore()
        task = store.add("a | b", "Rust")
        task.completed_count = 2

        save_tasks(store.tasks, path)
        loaded = load_tasks(path)

        assert [(t.name, t.language, t.completed_count) for t in loaded] == [("a | b", "Rust", 2)]

    def test_blank_name_lines_are_not_loaded(self, tmp_path: Path) -> None:
        path = tmp_path / "todo_list.txt"
        path.write_text(" | Rust | 2\nReal | Go | 1\n", encoding="utf-8")

        assert [t.name for t in load_tasks(path)] == ["Real"]

    def test_save_truncates(self, tmp_path: Path) -> None:
        path = tmp_path / "todo_list.txt"
        path.write_text("Old | Task | 9\nOlder | Task | 2\nOldest | Task | 1\n", encoding="utf-8")

        save_tasks([Task("New", "Go")], path)

        assert path.read_text(encoding="utf-8") == "New | Go | 0\n"

    def test_save_failure_is_reported(self, tmp_path: Path) -> None:
        path = tmp_path / "missing-dir" / "todo_list.txt"

        success, msg = save_tasks([Task("New", "Go")], path)

        assert not success
        assert msg.startswith("Could not save tasks")

    def test_default_path_uses_todo_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        import tasklist

        monkeypatch.setattr(tasklist, "TODO_FILE", tmp_path / "todo_list.txt")

        save_tasks([Task("A", "B", completed_count=2)])

        assert (tmp_path / "todo_list.txt").exists()
        assert load_tasks()[0].completed_count == 2
