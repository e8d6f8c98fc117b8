# tasks/task_codec.py

"""
JSON codec for tasks and task collections.

Document shapes:
- Task:        {"title": str, "description": str, "completed_at": null | <instant>}
- instant:     {"secs_since_epoch": int, "nanos_since_epoch": int}
- Collection:  {"tasks": [Task, ...]}

Decoded timestamps are aware UTC datetimes. datetime only holds microseconds,
so nanos below that are dropped on decode.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from ..config import get_settings
from .task_collection import TaskCollection
from .task_models import Task

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_NANOS_PER_SEC = 1_000_000_000
_MICROS_PER_SEC = 1_000_000


class TaskCodecError(ValueError):
    """Raised when a task document cannot be encoded or decoded."""


# ---- timestamps ----


def _instant_to_dict(ts: datetime) -> dict[str, int]:
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=UTC)

    delta = ts - _EPOCH
    if delta < timedelta(0):
        raise TaskCodecError(f"completed_at must not be before the Unix epoch: {ts.isoformat()}")

    total_us = (delta.days * 86_400 + delta.seconds) * _MICROS_PER_SEC + delta.microseconds
    secs, micros = divmod(total_us, _MICROS_PER_SEC)
    return {"secs_since_epoch": secs, "nanos_since_epoch": micros * 1000}


def _require_int(data: dict[str, Any], key: str) -> int:
    val = data.get(key)
    # bool is an int subclass; reject it explicitly.
    if isinstance(val, bool) or not isinstance(val, int):
        raise TaskCodecError(f"{key} must be an integer, got {val!r}")
    return val


def _instant_from_dict(data: Any) -> datetime:
    if not isinstance(data, dict):
        raise TaskCodecError(f"completed_at must be an object or null, got {type(data).__name__}")

    secs = _require_int(data, "secs_since_epoch")
    nanos = _require_int(data, "nanos_since_epoch")
    if secs < 0:
        raise TaskCodecError(f"secs_since_epoch must be >= 0, got {secs}")
    if not 0 <= nanos < _NANOS_PER_SEC:
        raise TaskCodecError(f"nanos_since_epoch out of range: {nanos}")

    try:
        return _EPOCH + timedelta(seconds=secs, microseconds=nanos // 1000)
    except OverflowError as exc:
        raise TaskCodecError(f"secs_since_epoch out of range: {secs}") from exc


# ---- tasks ----


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "title": task.title,
        "description": task.description,
        "completed_at": (
            _instant_to_dict(task.completed_at) if task.completed_at is not None else None
        ),
    }


def task_from_dict(data: Any) -> Task:
    if not isinstance(data, dict):
        raise TaskCodecError(f"task must be an object, got {type(data).__name__}")

    title = data.get("title")
    if not isinstance(title, str):
        raise TaskCodecError(f"task title must be a string, got {title!r}")

    description = data.get("description", "")
    if not isinstance(description, str):
        raise TaskCodecError(f"task description must be a string, got {description!r}")

    raw_ts = data.get("completed_at")
    completed_at = _instant_from_dict(raw_ts) if raw_ts is not None else None

    return Task(title=title, description=description, completed_at=completed_at)


# ---- collections ----


def collection_to_dict(collection: TaskCollection) -> dict[str, Any]:
    return {"tasks": [task_to_dict(t) for t in collection.tasks]}


def collection_from_dict(data: Any) -> TaskCollection:
    if not isinstance(data, dict):
        raise TaskCodecError(f"collection must be an object, got {type(data).__name__}")

    raw_tasks = data.get("tasks")
    if not isinstance(raw_tasks, list):
        raise TaskCodecError("collection.tasks must be a list")

    collection = TaskCollection.new()
    for i, raw in enumerate(raw_tasks):
        try:
            collection.add_task(task_from_dict(raw))
        except TaskCodecError as exc:
            raise TaskCodecError(f"tasks[{i}]: {exc}") from exc

    logger.debug("Decoded collection tasks=%d", len(collection.tasks))
    return collection


# ---- JSON text ----


def dumps(obj: Task | TaskCollection, *, indent: int | None = None) -> str:
    """
    Encode a Task or TaskCollection as JSON text.

    indent=None falls back to settings.json_indent (compact when unset).
    """
    if isinstance(obj, Task):
        payload = task_to_dict(obj)
    elif isinstance(obj, TaskCollection):
        payload = collection_to_dict(obj)
    else:
        raise TaskCodecError(f"cannot encode {type(obj).__name__}")

    if indent is None:
        indent = get_settings().json_indent
    return json.dumps(payload, ensure_ascii=False, indent=indent)


def _parse(text: str | bytes) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise TaskCodecError(f"invalid JSON: {exc.msg}") from exc


def loads_task(text: str | bytes) -> Task:
    return task_from_dict(_parse(text))


def loads_collection(text: str | bytes) -> TaskCollection:
    return collection_from_dict(_parse(text))
