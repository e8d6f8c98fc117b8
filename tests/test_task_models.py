# tests/test_task_models.py

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from seybio_task_manager.tasks import task_models
from seybio_task_manager.tasks.task_models import Task


@pytest.mark.parametrize("title", ["new Task", ""])
def test_task_new_sets_defaults(title: str) -> None:
    task = Task.new(title)
    assert task.title == title
    assert task.description == ""
    assert task.completed_at is None
    assert not task.is_completed


def test_complete_sets_timestamp() -> None:
    task = Task.new("new Task")
    task.complete()
    assert task.completed_at is not None
    assert task.completed_at.tzinfo is not None
    assert task.is_completed


def test_complete_twice_keeps_first_timestamp(monkeypatch: pytest.MonkeyPatch) -> None:
    ticks = iter(
        [
            datetime(2024, 1, 1, 12, 0, tzinfo=UTC),
            datetime(2024, 1, 1, 13, 0, tzinfo=UTC),
        ]
    )
    calls = {"n": 0}

    def fake_now() -> datetime:
        calls["n"] += 1
        return next(ticks)

    monkeypatch.setattr(task_models, "_now", fake_now)

    task = Task.new("new Task")
    task.complete()
    first = task.completed_at
    task.complete()

    assert task.completed_at == first == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
    assert calls["n"] == 1, "second complete() must not read the clock"


def test_uncomplete_resets_from_any_state() -> None:
    task = Task.new("new Task")
    task.uncomplete()
    assert task.completed_at is None

    task.complete()
    task.uncomplete()
    assert task.completed_at is None

    # Completing again after uncomplete takes a fresh timestamp.
    task.complete()
    assert task.completed_at is not None


def test_equality_is_field_wise() -> None:
    stamp = datetime(2024, 5, 1, tzinfo=UTC)
    a = Task("t", "d", stamp)
    assert a == Task("t", "d", stamp)
    assert a != Task("t", "other", stamp)
    assert a != Task("other", "d", stamp)
    assert a != Task("t", "d", None)


def test_clone_is_independent() -> None:
    original = Task.new("task 1")
    copy = original.clone()
    assert copy == original
    assert copy is not original

    copy.complete()
    assert original.completed_at is None
    assert copy != original
