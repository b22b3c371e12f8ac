# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from taskpad.tasks.task_models import Task, TaskSequence


@dataclass(slots=True)
class RecordingObserver:
    """
    Store observer for unit tests.

    Captures every published sequence for assertions.
    """

    published: list[TaskSequence] = field(default_factory=list)

    def __call__(self, tasks: TaskSequence) -> None:
        self.published.append(tasks)

    @property
    def last(self) -> TaskSequence:
        return self.published[-1]


@dataclass(slots=True)
class RecordingEmitter:
    lines: list[str] = field(default_factory=list)

    def __call__(self, text: str) -> None:
        self.lines.append(text)


def make_task(title: str, **kwargs) -> Task:
    """Task with a readable, deterministic id (defaults to the title)."""
    kwargs.setdefault("id", title)
    return Task(title=title, **kwargs)
