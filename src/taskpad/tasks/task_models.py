# src/taskpad/tasks/task_models.py

from __future__ import annotations

import sys
import uuid
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any


class SortOrder(StrEnum):
    """
    Sort policy re-applied by the store after each mutation while active.

    "No sort order" is represented by None, not by a member.
    """

    PRIORITY = "priority"
    DUE_DATE = "due_date"
    NAME = "name"

    @classmethod
    def parse(cls, raw: str) -> SortOrder:
        key = (raw or "").strip().lower().replace("-", "_")
        aliases = {"due": cls.DUE_DATE, "date": cls.DUE_DATE, "title": cls.NAME}
        if key in aliases:
            return aliases[key]
        return cls(key)


PRIORITIES: tuple[str, ...] = ("High", "Medium", "Low")
DEFAULT_PRIORITY = "Medium"

_PRIORITY_RANK = {"high": 1, "medium": 2, "low": 3}


def priority_rank(priority: str | None) -> int:
    """High -> 1, Medium -> 2, Low -> 3; anything else sorts last."""
    if priority is None:
        return sys.maxsize
    return _PRIORITY_RANK.get(priority.lower(), sys.maxsize)


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True, slots=True)
class Task:
    title: str
    description: str = ""
    priority: str = DEFAULT_PRIORITY
    done: bool = False
    due_date: int = 0  # ms since epoch, 0 = no due date
    id: str = field(default_factory=_new_id)

    @property
    def has_due_date(self) -> bool:
        return self.due_date != 0

    def same_item(self, other: Task) -> bool:
        """Identity check (id only). Full-field equality is plain ==."""
        return self.id == other.id

    def toggled(self) -> Task:
        return replace(self, done=not self.done)

    def edited(self, **changes: Any) -> Task:
        if "id" in changes:
            raise ValueError("task id is immutable")
        return replace(self, **changes)


TaskSequence = tuple[Task, ...]
