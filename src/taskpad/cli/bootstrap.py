# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires storage, session and the console view into AppState,
- subscribes persistence and display to the task store, then loads tasks.
"""

from __future__ import annotations

import logging

from ..auth.session import SessionStore
from ..config import get_settings
from ..core.state import KEY_THEME_MODE, KEY_TWO_PANE, AppState
from ..storage.kv_store import KeyValueStore
from ..tasks.task_actions import welcome_tasks
from ..tasks.task_storage import TaskStorage
from ..tasks.task_store import TaskStore
from ..ui.theme import theme_for
from ..ui.views import ConsoleTaskList

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.task_prefs_path.parent.mkdir(parents=True, exist_ok=True)
    settings.login_prefs_path.parent.mkdir(parents=True, exist_ok=True)
    settings.ui_prefs_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    ui_prefs = KeyValueStore(settings.ui_prefs_path)
    theme_mode = ui_prefs.get_str(KEY_THEME_MODE, settings.theme)
    two_pane = ui_prefs.get_bool(KEY_TWO_PANE, settings.two_pane)

    storage = TaskStorage(KeyValueStore(settings.task_prefs_path))
    view = ConsoleTaskList(theme=theme_for(theme_mode))
    store = TaskStore()

    # Display first, then persistence: the order observers are notified in.
    store.subscribe(view)
    store.subscribe(storage)

    state = AppState(
        settings=settings,
        store=store,
        storage=storage,
        session=SessionStore(KeyValueStore(settings.login_prefs_path)),
        ui_prefs=ui_prefs,
        view=view,
        two_pane=two_pane,
    )

    tasks = list(storage.load())
    if not tasks and settings.seed_welcome_tasks:
        tasks = welcome_tasks()
        logger.info("No saved tasks; seeded %d welcome tasks.", len(tasks))
    store.replace_all(tasks)
    return state
