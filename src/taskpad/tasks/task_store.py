# src/taskpad/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from .task_models import SortOrder, Task, TaskSequence, priority_rank

logger = logging.getLogger(__name__)

TaskObserver = Callable[[TaskSequence], Any]


def _due_date_key(task: Task) -> tuple[bool, int]:
    # Undated tasks (0) go last; two undated tasks compare equal.
    if task.due_date == 0:
        return (True, 0)
    return (False, task.due_date)


_SORT_KEYS: dict[SortOrder, Callable[[Task], Any]] = {
    SortOrder.PRIORITY: lambda t: priority_rank(t.priority),
    SortOrder.DUE_DATE: _due_date_key,
    SortOrder.NAME: lambda t: t.title.lower(),
}


def sort_tasks(tasks: Iterable[Task], order: SortOrder) -> TaskSequence:
    """Stable sort: ties keep their prior relative order."""
    return tuple(sorted(tasks, key=_SORT_KEYS[order]))


class TaskStore:
    """
    In-memory owner of the current task sequence.

    Every mutation builds a new tuple, re-applies the active sort order and
    publishes: the tuple becomes `current` and each observer is called with
    the full new sequence (never a delta).

    Invalid input (out-of-range position, sort on empty) is a silent no-op.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._current: TaskSequence = tuple(tasks)
        self._sort_order: SortOrder | None = None
        self._observers: list[TaskObserver] = []

    # ---- read side ----

    @property
    def current(self) -> TaskSequence:
        return self._current

    @property
    def sort_order(self) -> SortOrder | None:
        return self._sort_order

    def __len__(self) -> int:
        return len(self._current)

    def index_of(self, task_id: str) -> int:
        for i, t in enumerate(self._current):
            if t.id == task_id:
                return i
        return -1

    def find_by_id(self, task_id: str) -> Task | None:
        i = self.index_of(task_id)
        return self._current[i] if i >= 0 else None

    # ---- observers ----

    def subscribe(self, observer: TaskObserver) -> Callable[[], None]:
        """Register `observer`; returns a callable that unsubscribes it."""
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    def _publish(self, tasks: TaskSequence) -> None:
        self._current = tasks
        logger.debug("Publishing %d tasks (sort=%s)", len(tasks), self._sort_order)
        for observer in list(self._observers):
            try:
                observer(tasks)
            except Exception:
                logger.exception("Task observer %r failed.", observer)

    def _sorted_if_active(self, tasks: Iterable[Task]) -> TaskSequence:
        if self._sort_order is None:
            return tuple(tasks)
        return sort_tasks(tasks, self._sort_order)

    # ---- mutations ----

    def replace_all(self, tasks: Iterable[Task]) -> None:
        """Initial load. Accepts an empty sequence."""
        self._publish(self._sorted_if_active(tasks))

    def add(self, task: Task) -> bool:
        if self.index_of(task.id) >= 0:
            logger.warning("Rejected task with duplicate id=%s", task.id)
            return False
        self._publish(self._sorted_if_active((*self._current, task)))
        return True

    def remove_at(self, position: int) -> None:
        if not 0 <= position < len(self._current):
            logger.debug("remove_at(%s) out of range, ignored.", position)
            return
        current = list(self._current)
        del current[position]
        self._publish(tuple(current))

    def update_by_id(self, task: Task) -> None:
        current = list(self._current)
        for i, t in enumerate(current):
            if t.id == task.id:
                current[i] = task
                break
        else:
            # Still republished: observers see an unchanged sequence.
            logger.debug("update_by_id: id=%s not found.", task.id)
        self._publish(self._sorted_if_active(current))

    def sort_by(self, order: SortOrder) -> None:
        if not self._current:
            return
        self._sort_order = order
        self._publish(sort_tasks(self._current, order))
