"""
In-memory task list.

Public API:
- Task: a to-do item (title, description, optional completion time)
- Collection: protocol for task containers
- TaskCollection: list-backed Collection[Task]
"""

from .core.ports import Collection
from .tasks.task_collection import TaskCollection
from .tasks.task_models import Task

__all__ = ["Collection", "Task", "TaskCollection"]
