# tasks/task_collection.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .task_models import Task

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TaskCollection:
    """
    List-backed Collection[Task].

    tasks keeps insertion order and allows duplicates. It always holds exactly
    the tasks added and not yet removed.
    """

    tasks: list[Task] = field(default_factory=list)

    @classmethod
    def new(cls) -> TaskCollection:
        return cls()

    def add_task(self, task: Task) -> None:
        self.tasks.append(task)
        logger.debug("Task added title=%r total=%d", task.title, len(self.tasks))

    def remove_task(self, task: Task) -> None:
        """Remove every entry equal to task. Survivors keep their order."""
        before = len(self.tasks)
        # In place: callers holding a reference to .tasks see the update.
        self.tasks[:] = [t for t in self.tasks if t != task]
        removed = before - len(self.tasks)
        logger.debug("Task remove title=%r removed=%d total=%d", task.title, removed, len(self.tasks))
