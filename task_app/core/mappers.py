"""Mapping JSON-compatible task records into Task instances and back."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

import pandas as pd

from .config import TASK_CORE_COLUMNS
from .models import Task, TaskState, TaskType

logger = logging.getLogger(__name__)


def _parse_dt(val: Any) -> datetime | None:
    if val is None or val == "":
        return None
    ts = pd.to_datetime(val, utc=True, errors="coerce")
    if ts is None or pd.isna(ts):
        return None
    return ts.to_pydatetime()


def _require_dt(raw: Mapping[str, Any], key: str) -> datetime:
    value = _parse_dt(raw[key])
    if value is None:
        raise ValueError(f"Task field '{key}' is not a valid timestamp: {raw[key]!r}")
    return value


def _enum(enum_cls, raw: Mapping[str, Any], key: str):
    value = raw[key]
    try:
        return enum_cls(str(value).upper())
    except ValueError:
        raise ValueError(f"Unknown task {key} {value!r}") from None


def _iso(val: datetime | None) -> str | None:
    return val.isoformat() if val is not None else None


def map_task(raw: Mapping[str, Any]) -> Task:
    """Build a Task from an ingestion record (camelCase keys, ISO timestamps)."""
    return Task(
        id=str(raw["id"]),
        title=raw.get("title") or "",
        number=int(raw["number"]),
        type=_enum(TaskType, raw, "type"),
        state=_enum(TaskState, raw, "state"),
        status=raw.get("status") or None,
        repository=raw.get("repository") or None,
        assignees=tuple(a for a in (raw.get("assignees") or []) if a),
        priority=raw.get("priority"),
        created_at=_require_dt(raw, "createdAt"),
        updated_at=_require_dt(raw, "updatedAt"),
        due_date=_parse_dt(raw.get("dueDate")),
        added_to_project_at=_parse_dt(raw.get("addedToProjectAt")),
    )


def map_tasks(records: Iterable[Mapping[str, Any]], *, skip_invalid: bool = False) -> list[Task]:
    """Map many records; with ``skip_invalid`` malformed records are logged and dropped."""
    tasks: list[Task] = []
    for raw in records:
        try:
            tasks.append(map_task(raw))
        except (KeyError, ValueError, TypeError) as exc:
            if not skip_invalid:
                raise
            logger.warning("Skipping malformed task record %s: %s", raw.get("id"), exc)
    return tasks


def task_to_record(task: Task) -> dict[str, Any]:
    """Inverse of map_task: JSON-compatible primitives only."""
    return {
        "id": task.id,
        "title": task.title,
        "number": task.number,
        "type": task.type.value,
        "state": task.state.value,
        "status": task.status,
        "repository": task.repository,
        "assignees": list(task.assignees),
        "priority": task.priority,
        "createdAt": _iso(task.created_at),
        "updatedAt": _iso(task.updated_at),
        "dueDate": _iso(task.due_date),
        "addedToProjectAt": _iso(task.added_to_project_at),
    }


def tasks_to_dataframe(tasks: Iterable[Task]) -> pd.DataFrame:
    rows = []
    for t in tasks:
        rows.append(
            {
                "id": t.id,
                "number": t.number,
                "title": t.title,
                "type": t.type.value,
                "state": t.state.value,
                "status": t.status,
                "repository": t.repository,
                "assignees": ", ".join(t.assignees),
                "priority": t.priority,
                "created_at": t.created_at,
                "updated_at": t.updated_at,
                "due_date": t.due_date,
                "added_to_project_at": t.added_to_project_at,
            }
        )
    df = pd.DataFrame(rows, columns=list(TASK_CORE_COLUMNS))
    for col in ("created_at", "updated_at", "due_date", "added_to_project_at"):
        df[col] = pd.to_datetime(df[col], utc=True, errors="coerce")
    return df
