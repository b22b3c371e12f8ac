# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.cli.bootstrap import create_initial_state
from taskpad.core.state import AppState
from taskpad.ui.theme import Theme


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with create_initial_state().

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="taskpad-test",
        log_level="DEBUG",
        seed_welcome_tasks=False,
        two_pane=False,
        theme="system",
        data_dir=data_dir,
        task_prefs_path=data_dir / "task_prefs.json",
        login_prefs_path=data_dir / "login_prefs.json",
        ui_prefs_path=data_dir / "ui_prefs.json",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired exactly like the CLI, on tmp paths.

    Colors are forced off so rendered rows can be compared as plain text.
    """
    st = create_initial_state(settings=settings)
    st.view.theme = Theme(mode="system", enabled=False)
    return st


@pytest.fixture()
def logged_in_state(state: AppState) -> AppState:
    state.session.sign_up("user@example.com", "Passw0rd!")
    return state
