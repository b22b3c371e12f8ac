# src/taskpad/ui/views.py

"""
Console views: task rows, the detail pane and the two-pane layout.

ConsoleTaskList is the display-side observer. It never redraws from
scratch on a publish: it diffs what it shows against the new sequence and
applies the edit script to its own rows.
"""

from __future__ import annotations

import logging
import re
import shutil
from collections.abc import Sequence
from datetime import datetime

from ..tasks.task_diff import Change, EditOp, Insert, Move, Remove, apply_edit_script, diff_tasks
from ..tasks.task_models import Task, TaskSequence
from .theme import Theme

logger = logging.getLogger(__name__)

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
SEP = " | "
MIN_PANE_WIDTH = 24


def format_due(due_ms: int, *, with_time: bool = False) -> str:
    dt = datetime.fromtimestamp(due_ms / 1000)
    return dt.strftime("%b %d, %Y %H:%M" if with_time else "%b %d, %Y")


def _visible_len(s: str) -> int:
    return len(ANSI_RE.sub("", s))


def _pad(s: str, width: int) -> str:
    gap = width - _visible_len(s)
    return s + " " * gap if gap > 0 else s


def _clip(s: str, width: int) -> str:
    if len(s) <= width:
        return s
    return s[: max(1, width - 1)] + "…"


def render_row(position: int, task: Task, theme: Theme, *, width: int | None = None) -> str:
    box = "[x]" if task.done else "[ ]"
    title = task.title if width is None else _clip(task.title, max(8, width - 8))
    title = theme.done(title) if task.done else title
    line = f"{theme.index(f'{position + 1:>2}.')} {box} {title}  "
    line += theme.done(f"[{task.priority}]") if task.done else theme.priority(f"[{task.priority}]", task.priority)
    if task.has_due_date:
        line += theme.muted(f"  due {format_due(task.due_date)}")
    return line


def render_rows(tasks: Sequence[Task], theme: Theme, *, width: int | None = None) -> list[str]:
    if not tasks:
        return [theme.muted("(no tasks)")]
    return [render_row(i, t, theme, width=width) for i, t in enumerate(tasks)]


def render_detail(task: Task | None, theme: Theme | None = None) -> list[str]:
    theme = theme or Theme(enabled=False)
    if task is None:
        return [theme.header("No task selected"), "Use /open N to view a task's details."]

    if task.has_due_date:
        due = f"Due: {format_due(task.due_date, with_time=True)} | Priority: {task.priority}"
    else:
        due = f"No due date | Priority: {task.priority}"
    return [
        theme.header(task.title),
        task.description or "No description provided.",
        due,
        f"Status: {'Done' if task.done else 'Pending'}",
    ]


def render_two_pane(
    tasks: Sequence[Task],
    selected: Task | None,
    theme: Theme,
    *,
    total_width: int | None = None,
) -> list[str]:
    if total_width is None:
        total_width = shutil.get_terminal_size((100, 30)).columns
    pane = max(MIN_PANE_WIDTH, (total_width - len(SEP)) // 2)

    left = [theme.header("TASKS"), theme.header("-" * pane), *render_rows(tasks, theme, width=pane)]
    right = [theme.header("DETAILS"), theme.header("-" * pane), *render_detail(selected, theme)]

    out: list[str] = []
    for r in range(max(len(left), len(right))):
        lc = left[r] if r < len(left) else ""
        rc = right[r] if r < len(right) else ""
        out.append((_pad(lc, pane) + SEP + rc).rstrip())
    return out


def describe_op(op: EditOp) -> str:
    if isinstance(op, Remove):
        return f"remove #{op.index + 1} '{op.task.title}'"
    if isinstance(op, Insert):
        return f"insert #{op.index + 1} '{op.task.title}'"
    if isinstance(op, Move):
        return f"move '{op.task.title}' #{op.from_index + 1} -> #{op.to_index + 1}"
    return f"update #{op.index + 1} '{op.task.title}'"


class ConsoleTaskList:
    """Rows currently shown on the console, kept in sync through edit scripts."""

    def __init__(self, theme: Theme | None = None) -> None:
        self.theme = theme or Theme()
        self.rows: list[Task] = []
        self.last_script: list[EditOp] = []
        self._dirty = False

    def __call__(self, tasks: TaskSequence) -> None:
        script = diff_tasks(self.rows, tasks)
        self.rows = apply_edit_script(self.rows, script)
        self.last_script = script
        if script:
            self._dirty = True
            for op in script:
                logger.debug("row %s", describe_op(op))

    def consume_dirty(self) -> bool:
        """True once after the rows changed; reset by the call."""
        dirty, self._dirty = self._dirty, False
        return dirty

    def render(self, *, two_pane: bool = False, selected: Task | None = None) -> list[str]:
        self._dirty = False
        if two_pane:
            return render_two_pane(self.rows, selected, self.theme)
        return render_rows(self.rows, self.theme)
