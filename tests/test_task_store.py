# tests/test_task_store.py

from __future__ import annotations

from taskpad.tasks.task_diff import Remove, diff_tasks
from taskpad.tasks.task_models import SortOrder, Task
from taskpad.tasks.task_store import TaskStore

from .fakes import RecordingObserver, make_task


def _store(*tasks: Task) -> tuple[TaskStore, RecordingObserver]:
    store = TaskStore(tasks)
    obs = RecordingObserver()
    store.subscribe(obs)
    return store, obs


def _titles(tasks) -> list[str]:
    return [t.title for t in tasks]


def test_add_publishes_a_new_sequence_and_keeps_the_old_one() -> None:
    store, obs = _store(make_task("a"))
    before = store.current

    task = Task(title="fresh")
    assert store.add(task) is True

    assert before == (make_task("a"),)
    assert store.current is not before
    assert obs.last is store.current
    found = store.find_by_id(task.id)
    assert found == task


def test_add_rejects_duplicate_id_without_publishing() -> None:
    store, obs = _store(make_task("a"))

    assert store.add(make_task("a", priority="High")) is False

    assert obs.published == []
    assert store.current[0].priority == "Medium"


def test_remove_at_in_range_and_out_of_range() -> None:
    store, obs = _store(make_task("a"), make_task("b"), make_task("c"))

    store.remove_at(1)
    assert _titles(store.current) == ["a", "c"]
    assert len(obs.published) == 1

    store.remove_at(5)
    store.remove_at(-1)
    assert _titles(store.current) == ["a", "c"]
    assert len(obs.published) == 1


def test_remove_at_diffs_to_a_single_remove() -> None:
    store = TaskStore([make_task("a"), make_task("b"), make_task("c")])
    before = store.current

    store.remove_at(1)

    assert diff_tasks(before, store.current) == [Remove(1, make_task("b"))]


def test_update_by_id_replaces_in_place() -> None:
    store, obs = _store(make_task("a"), make_task("b"))

    store.update_by_id(make_task("b", done=True))

    assert store.current[1].done is True
    assert store.current[0] == make_task("a")
    assert len(obs.published) == 1


def test_update_by_unknown_id_still_republishes() -> None:
    store, obs = _store(make_task("a"))
    before = store.current

    store.update_by_id(make_task("ghost"))

    assert len(obs.published) == 1
    assert obs.last == before
    assert obs.last is not before


def test_sort_by_priority() -> None:
    store, _ = _store(
        make_task("x", priority="Low"),
        make_task("y", priority="High"),
        make_task("z", priority="Medium"),
    )

    store.sort_by(SortOrder.PRIORITY)

    assert [t.priority for t in store.current] == ["High", "Medium", "Low"]
    assert store.sort_order is SortOrder.PRIORITY


def test_sort_by_due_date_puts_undated_last_in_prior_order() -> None:
    store, _ = _store(
        make_task("n1", due_date=0),
        make_task("d500", due_date=500),
        make_task("n2", due_date=0),
        make_task("d100", due_date=100),
    )

    store.sort_by(SortOrder.DUE_DATE)

    assert _titles(store.current) == ["d100", "d500", "n1", "n2"]


def test_sort_by_name_is_case_insensitive() -> None:
    store, _ = _store(make_task("banana"), make_task("Apple"))

    store.sort_by(SortOrder.NAME)

    assert _titles(store.current) == ["Apple", "banana"]


def test_sort_is_idempotent_and_stable_on_ties() -> None:
    store, _ = _store(
        make_task("b", priority="Low"),
        make_task("a", priority="High"),
        make_task("c", priority="Low"),
        make_task("d", priority="unknown"),
        make_task("e", priority="High"),
    )

    store.sort_by(SortOrder.PRIORITY)
    once = store.current
    store.sort_by(SortOrder.PRIORITY)

    assert store.current == once
    assert _titles(once) == ["a", "e", "b", "c", "d"]


def test_sort_on_empty_is_a_noop() -> None:
    store, obs = _store()

    store.sort_by(SortOrder.NAME)

    assert obs.published == []
    assert store.sort_order is None


def test_active_sort_order_is_reapplied_after_mutations() -> None:
    store, _ = _store(make_task("b"), make_task("c"))
    store.sort_by(SortOrder.NAME)

    store.add(make_task("a"))
    assert _titles(store.current) == ["a", "b", "c"]

    store.update_by_id(make_task("a").edited(title="z"))
    assert _titles(store.current) == ["b", "c", "z"]

    store.replace_all([make_task("q"), make_task("p")])
    assert _titles(store.current) == ["p", "q"]


def test_replace_all_accepts_empty_and_publishes() -> None:
    store, obs = _store(make_task("a"))

    store.replace_all([])

    assert store.current == ()
    assert obs.last == ()


def test_failing_observer_does_not_block_others() -> None:
    store = TaskStore()
    calls: list[int] = []

    def broken(_tasks) -> None:
        raise RuntimeError("boom")

    store.subscribe(broken)
    store.subscribe(lambda tasks: calls.append(len(tasks)))

    store.add(make_task("a"))

    assert calls == [1]


def test_unsubscribe_stops_notifications() -> None:
    store = TaskStore()
    obs = RecordingObserver()
    unsubscribe = store.subscribe(obs)

    store.add(make_task("a"))
    unsubscribe()
    store.add(make_task("b"))

    assert len(obs.published) == 1


def test_lookup_helpers() -> None:
    store = TaskStore([make_task("a"), make_task("b")])

    assert store.index_of("b") == 1
    assert store.index_of("zzz") == -1
    assert store.find_by_id("zzz") is None
    assert len(store) == 2
