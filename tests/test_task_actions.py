# tests/test_task_actions.py

from __future__ import annotations

from datetime import datetime

from taskpad.core.state import AppState
from taskpad.tasks.task_actions import (
    DAY_MS,
    AddTask,
    DeleteTask,
    EditTask,
    MarkDone,
    OpenTask,
    context_menu,
    handle_action,
    welcome_tasks,
)
from taskpad.tasks.task_diff import Change

from .fakes import make_task


def test_add_then_duplicate(state: AppState) -> None:
    task = make_task("Buy milk")

    assert handle_action(state, AddTask(task)) == "Task 'Buy milk' added."
    assert handle_action(state, AddTask(task)) == "Task 'Buy milk' already exists."
    assert len(state.store) == 1


def test_mark_done_toggles_the_current_version(state: AppState) -> None:
    stale = make_task("Buy milk")
    state.store.add(stale)
    state.store.update_by_id(stale.edited(priority="High"))

    assert handle_action(state, MarkDone(stale)) == "'Buy milk' marked as Done"
    current = state.store.find_by_id(stale.id)
    assert current is not None
    assert current.done is True
    assert current.priority == "High"

    # The display got a re-bind for the row, not a remove + insert.
    assert state.view.last_script == [Change(0, current)]

    assert handle_action(state, MarkDone(stale)) == "'Buy milk' marked as Pending"


def test_edit_and_delete(state: AppState) -> None:
    task = make_task("Old")
    state.store.add(task)

    assert handle_action(state, EditTask(task.edited(title="New"))) == "Task 'New' updated."
    assert state.store.current[0].title == "New"

    state.selected_task_id = task.id
    assert handle_action(state, DeleteTask(task)) == "Task 'Old' deleted."
    assert len(state.store) == 0
    assert state.selected_task_id is None
    assert handle_action(state, DeleteTask(task)) == "Task not found."
    assert handle_action(state, MarkDone(task)) == "Task not found."


def test_open_selects_and_shows_details(state: AppState) -> None:
    due = int(datetime(2026, 10, 21, 9, 30).timestamp() * 1000)
    task = make_task("Dentist", priority="High", due_date=due)
    state.store.add(task)

    text = handle_action(state, OpenTask(task))

    assert state.selected_task_id == task.id
    assert state.selected_task() == task
    assert text.splitlines() == [
        "Dentist",
        "No description provided.",
        "Due: Oct 21, 2026 09:30 | Priority: High",
        "Status: Pending",
    ]


def test_context_menu_carries_task_and_position() -> None:
    pending = make_task("a")
    menu = context_menu(pending, 2)

    assert menu.task is pending
    assert menu.position == 2
    assert [e.label for e in menu.entries] == ["Edit", "Delete", "Mark as Done"]
    assert menu.entries[1].command == "/del 3"
    assert isinstance(menu.entries[2].action, MarkDone)

    done_menu = context_menu(pending.toggled(), 0)
    assert done_menu.entries[2].label == "Mark as Pending"


def test_welcome_tasks() -> None:
    first, second = welcome_tasks(now_ms=1_000)

    assert (first.title, first.priority, first.due_date) == ("Welcome Task", "High", 1_000 + 2 * DAY_MS)
    assert (second.title, second.priority, second.due_date) == ("Explore App", "Medium", 0)
