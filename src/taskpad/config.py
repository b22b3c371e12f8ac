# src/taskpad/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Everything lives under a local (gitignored) data directory by default.
- Settings stay injectable: callers may pass any object with the same attributes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKPAD"

THEMES: tuple[str, ...] = ("light", "dark", "system")

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = _env(name, default).strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Startup behaviour ----
    seed_welcome_tasks: bool

    # ---- UI defaults (overridden by saved preferences) ----
    two_pane: bool
    theme: str

    # ---- Local data paths ----
    data_dir: Path
    task_prefs_path: Path
    login_prefs_path: Path
    ui_prefs_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskpad").strip() or "taskpad"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        seed_welcome_tasks = _env_bool(_k("SEED_WELCOME_TASKS"), True)
        two_pane = _env_bool(_k("TWO_PANE"), False)
        theme = _env_choice(_k("THEME"), THEMES, "system")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskpad"))
        task_prefs_path = _env_path(_k("TASK_PREFS_PATH"), data_dir / "task_prefs.json")
        login_prefs_path = _env_path(_k("LOGIN_PREFS_PATH"), data_dir / "login_prefs.json")
        ui_prefs_path = _env_path(_k("UI_PREFS_PATH"), data_dir / "ui_prefs.json")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            seed_welcome_tasks=seed_welcome_tasks,
            two_pane=two_pane,
            theme=theme,
            data_dir=data_dir,
            task_prefs_path=task_prefs_path,
            login_prefs_path=login_prefs_path,
            ui_prefs_path=ui_prefs_path,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
