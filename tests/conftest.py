# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from seybio_task_manager import Task, TaskCollection
from seybio_task_manager.logging_setup import _ConsoleNoiseFilter


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with Settings consumers.

    We use a SimpleNamespace rather than the real config module so tests do
    not depend on the environment of the machine running them.
    """
    return SimpleNamespace(
        app_name="seybio-tasks-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        json_indent=None,
    )


@pytest.fixture()
def task_pair() -> tuple[Task, Task]:
    return Task.new("task 1"), Task.new("task 2")


@pytest.fixture()
def collection(task_pair: tuple[Task, Task]) -> TaskCollection:
    task1, task2 = task_pair
    col = TaskCollection.new()
    col.add_task(task1.clone())
    col.add_task(task2.clone())
    return col


@pytest.fixture()
def restore_root_logging():
    """Drop the handlers setup_logging installs and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield root
    for h in list(root.handlers):
        if isinstance(h, logging.FileHandler) or any(
            isinstance(f, _ConsoleNoiseFilter) for f in h.filters
        ):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)
