# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import UTC, datetime


def _now() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class Task:
    """
    A single to-do item.

    Notes:
    - title and description are set at construction; no method changes them.
    - completed_at is None while the task is open, otherwise the UTC instant
      it was first marked done.
    """

    title: str
    description: str = ""
    completed_at: datetime | None = None

    @classmethod
    def new(cls, title: str) -> Task:
        return cls(title=title)

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None

    def complete(self) -> None:
        """Mark as done. An existing completion time is never overwritten."""
        if self.completed_at is None:
            self.completed_at = _now()

    def uncomplete(self) -> None:
        self.completed_at = None

    def clone(self) -> Task:
        return replace(self)
