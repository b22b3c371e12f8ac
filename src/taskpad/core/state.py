# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..storage.kv_store import KeyValueStore
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore
from ..ui.views import ConsoleTaskList
from .ports import Session, TaskPersistence

KEY_THEME_MODE = "theme_mode"
KEY_TWO_PANE = "two_pane"


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules.
    settings: object

    store: TaskStore
    storage: TaskPersistence
    session: Session
    ui_prefs: KeyValueStore
    view: ConsoleTaskList

    two_pane: bool = False
    selected_task_id: str | None = None

    def selected_task(self) -> Task | None:
        if self.selected_task_id is None:
            return None
        return self.store.find_by_id(self.selected_task_id)
