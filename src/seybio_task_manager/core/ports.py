# src/seybio_task_manager/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) for task containers.

Callers depend on the Collection protocol instead of a concrete container.
Any type with these methods qualifies: list-backed, map-backed, etc.
"""

from typing import Protocol, Self, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Collection(Protocol[T]):
    """
    Minimal task container.

    - new() builds an empty container
    - add_task() always succeeds (no duplicate check, no capacity limit)
    - remove_task() drops entries equal to the value; absent value is a no-op
    """

    @classmethod
    def new(cls) -> Self: ...

    def add_task(self, task: T) -> None: ...
    def remove_task(self, task: T) -> None: ...
