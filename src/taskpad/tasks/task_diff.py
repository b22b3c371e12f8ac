# src/taskpad/tasks/task_diff.py

"""
Row-level diff between two task sequences.

diff_tasks(old, new) returns an edit script that, applied in order to a
display positioned per `old`, leaves it positioned per `new`:

- rows are matched by Task.id, never by position;
- a matched row whose fields changed gets a Change (re-bind), not a
  Remove + Insert;
- rows present on both sides are kept in place when they belong to the
  longest run whose relative order survived; only the others are moved.

Script layout: removes (descending index), moves, inserts (ascending
index), content changes (final index). Indices are always valid for the
display state at the moment the op is applied.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from dataclasses import dataclass

from .task_models import Task


@dataclass(frozen=True, slots=True)
class Remove:
    index: int
    task: Task


@dataclass(frozen=True, slots=True)
class Insert:
    index: int
    task: Task


@dataclass(frozen=True, slots=True)
class Move:
    from_index: int
    to_index: int
    task: Task


@dataclass(frozen=True, slots=True)
class Change:
    index: int
    task: Task


EditOp = Remove | Insert | Move | Change


def _anchored_ids(rows: Sequence[Task], target_pos: dict[str, int]) -> set[str]:
    """
    Ids of the rows that can stay put: a longest increasing subsequence of
    their target positions, taken in current order.
    """
    seq = [target_pos[t.id] for t in rows]
    tails: list[int] = []
    tail_at: list[int] = []
    parent = [-1] * len(seq)

    for i, pos in enumerate(seq):
        k = bisect_left(tails, pos)
        if k == len(tails):
            tails.append(pos)
            tail_at.append(i)
        else:
            tails[k] = pos
            tail_at[k] = i
        parent[i] = tail_at[k - 1] if k > 0 else -1

    anchored: set[str] = set()
    i = tail_at[-1] if tail_at else -1
    while i != -1:
        anchored.add(rows[i].id)
        i = parent[i]
    return anchored


def diff_tasks(old: Sequence[Task], new: Sequence[Task]) -> list[EditOp]:
    old_ids = {t.id for t in old}
    new_ids = {t.id for t in new}
    script: list[EditOp] = []

    for i in range(len(old) - 1, -1, -1):
        if old[i].id not in new_ids:
            script.append(Remove(i, old[i]))

    kept = [t for t in old if t.id in new_ids]
    common_new = [t for t in new if t.id in old_ids]
    target_pos = {t.id: i for i, t in enumerate(common_new)}
    anchored = _anchored_ids(kept, target_pos)

    # Every row before `t` in new order is already in its final relative
    # place, so dropping `t` right after its predecessor settles it too.
    work = [t.id for t in kept]
    prev_id: str | None = None
    for t in common_new:
        if t.id not in anchored:
            src = work.index(t.id)
            work.pop(src)
            dst = work.index(prev_id) + 1 if prev_id is not None else 0
            work.insert(dst, t.id)
            if src != dst:
                script.append(Move(src, dst, t))
        prev_id = t.id

    for j, t in enumerate(new):
        if t.id not in old_ids:
            script.append(Insert(j, t))

    old_by_id = {t.id: t for t in old}
    for j, t in enumerate(new):
        before = old_by_id.get(t.id)
        if before is not None and before != t:
            script.append(Change(j, t))

    return script


def apply_edit_script(rows: Sequence[Task], script: Sequence[EditOp]) -> list[Task]:
    """Apply `script` to a copy of `rows` and return the result."""
    out = list(rows)
    for op in script:
        if isinstance(op, Remove):
            del out[op.index]
        elif isinstance(op, Insert):
            out.insert(op.index, op.task)
        elif isinstance(op, Move):
            out.insert(op.to_index, out.pop(op.from_index))
        elif isinstance(op, Change):
            out[op.index] = op.task
    return out
