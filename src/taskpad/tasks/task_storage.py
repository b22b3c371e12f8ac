# src/taskpad/tasks/task_storage.py

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from ..storage.kv_store import KeyValueStore
from .task_models import DEFAULT_PRIORITY, Task, TaskSequence

logger = logging.getLogger(__name__)

KEY_TASKS = "tasks"


def task_to_record(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "priority": task.priority,
        "isDone": task.done,
        "dueDate": task.due_date,
    }


def _priority_from_record(raw: dict[str, Any]) -> str:
    # Only a missing key gets the default; null or blank stays unranked.
    if "priority" not in raw:
        return DEFAULT_PRIORITY
    value = raw["priority"]
    return "" if value is None else str(value)


def task_from_record(raw: dict[str, Any]) -> Task:
    # Older blobs wrote the flag as "done".
    done = raw.get("isDone", raw.get("done", False))
    return Task(
        id=str(raw["id"]),
        title=str(raw.get("title") or ""),
        description=str(raw.get("description") or ""),
        priority=_priority_from_record(raw),
        done=bool(done),
        due_date=int(raw.get("dueDate") or 0),
    )


class TaskStorage:
    """
    Tasks persisted as one JSON array string under the "tasks" key.

    Malformed blobs are not handled: the blob is only ever written by save().
    """

    def __init__(self, kv: KeyValueStore) -> None:
        self._kv = kv

    def save(self, tasks: Iterable[Task]) -> None:
        records = [task_to_record(t) for t in tasks]
        self._kv.put_str(KEY_TASKS, json.dumps(records, ensure_ascii=False))
        logger.debug("Saved %d tasks to %s", len(records), self._kv.path)

    def load(self) -> TaskSequence:
        blob = self._kv.get_str(KEY_TASKS)
        if blob is None:
            return ()
        tasks = tuple(task_from_record(r) for r in json.loads(blob))
        logger.info("Loaded %d tasks from %s", len(tasks), self._kv.path)
        return tasks

    def __call__(self, tasks: TaskSequence) -> None:
        """Store observer hook: persist every published sequence."""
        try:
            self.save(tasks)
        except Exception:
            logger.exception("Failed to persist tasks to %s", self._kv.path)
