# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the app state and the action handler.

State depends on Protocols instead of concrete implementations.
This keeps storage and session swappable and makes testing easier.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task, TaskSequence


class TaskPersistence(Protocol):
    """Durable copy of the task sequence (local key-value storage)."""
    def save(self, tasks: Iterable[Task]) -> None: ...
    def load(self) -> TaskSequence: ...


class Session(Protocol):
    def is_logged_in(self) -> bool: ...
    def sign_up(self, email: str, password: str) -> None: ...
    def login(self, email: str, password: str) -> bool: ...
    def logout(self) -> None: ...

    @property
    def email(self) -> str | None: ...

