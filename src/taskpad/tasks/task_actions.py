# src/taskpad/tasks/task_actions.py

"""
Task action requests and their single handler.

Every request carries the task it is about; the context menu is built from
an explicit (task, position) pair instead of a remembered selection.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from ..core.state import AppState
from ..ui.views import render_detail
from .task_models import Task

logger = logging.getLogger(__name__)

DAY_MS = 86_400_000


@dataclass(frozen=True, slots=True)
class AddTask:
    task: Task


@dataclass(frozen=True, slots=True)
class EditTask:
    task: Task  # edited copy; same id as the stored task


@dataclass(frozen=True, slots=True)
class DeleteTask:
    task: Task


@dataclass(frozen=True, slots=True)
class MarkDone:
    task: Task


@dataclass(frozen=True, slots=True)
class OpenTask:
    task: Task


TaskAction = AddTask | EditTask | DeleteTask | MarkDone | OpenTask


@dataclass(frozen=True, slots=True)
class MenuEntry:
    label: str
    action: TaskAction
    command: str


@dataclass(frozen=True, slots=True)
class ContextMenu:
    task: Task
    position: int
    entries: tuple[MenuEntry, ...]


def context_menu(task: Task, position: int) -> ContextMenu:
    n = position + 1
    return ContextMenu(
        task=task,
        position=position,
        entries=(
            MenuEntry("Edit", EditTask(task), f"/edit {n} title=..."),
            MenuEntry("Delete", DeleteTask(task), f"/del {n}"),
            MenuEntry("Mark as Pending" if task.done else "Mark as Done", MarkDone(task), f"/done {n}"),
        ),
    )


def welcome_tasks(now_ms: int | None = None) -> list[Task]:
    """Starter tasks for an empty list."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return [
        Task(
            title="Welcome Task",
            description="This is your first task! Use /menu N to see what you can do with it.",
            priority="High",
            due_date=now_ms + 2 * DAY_MS,
        ),
        Task(
            title="Explore App",
            description="Try adding a new task with /add.",
            priority="Medium",
        ),
    ]


def handle_action(state: AppState, action: TaskAction) -> str:
    """Apply `action` to the store and return a user-facing message."""
    store = state.store
    task = action.task

    if isinstance(action, AddTask):
        if not store.add(task):
            return f"Task '{task.title}' already exists."
        return f"Task '{task.title}' added."

    if isinstance(action, EditTask):
        store.update_by_id(task)
        return f"Task '{task.title}' updated."

    if isinstance(action, DeleteTask):
        position = store.index_of(task.id)
        if position < 0:
            return "Task not found."
        store.remove_at(position)
        if state.selected_task_id == task.id:
            state.selected_task_id = None
        return f"Task '{task.title}' deleted."

    if isinstance(action, MarkDone):
        current = store.find_by_id(task.id)
        if current is None:
            return "Task not found."
        updated = current.toggled()
        store.update_by_id(updated)
        return f"'{updated.title}' marked as {'Done' if updated.done else 'Pending'}"

    if isinstance(action, OpenTask):
        current = store.find_by_id(task.id) or task
        state.selected_task_id = current.id
        return "\n".join(render_detail(current, state.view.theme))

    logger.warning("Unhandled task action %r", action)
    return "Unsupported action."
