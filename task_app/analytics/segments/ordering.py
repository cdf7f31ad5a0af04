"""Sorting and date-range filtering of task sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime
from enum import Enum
from typing import Any

from task_app.analytics.metrics.dates import as_utc
from task_app.analytics.metrics.priority import priority_bucket
from task_app.core.models import PriorityBucket, Task


class SortKey(str, Enum):
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    DUE_DATE = "due_date"
    ADDED_TO_PROJECT_AT = "added_to_project_at"
    NUMBER = "number"
    TITLE = "title"
    STATE = "state"
    TYPE = "type"
    STATUS = "status"
    REPOSITORY = "repository"
    PRIORITY = "priority"


_PRIORITY_RANK = {PriorityBucket.P0: 0, PriorityBucket.P1: 1}


def _priority_rank(task: Task) -> tuple[int, str] | None:
    """P0, P1, then any other non-empty priority by its lowercased string."""
    if not task.priority:
        return None
    rank = _PRIORITY_RANK.get(priority_bucket(task.priority))
    if rank is not None:
        return rank, ""
    return len(_PRIORITY_RANK), task.priority.lower()


def _lower(value: str | None) -> str | None:
    return value.lower() if value else None


# One sort-value function per key; None means "absent" and sorts last.
SORT_VALUES: dict[SortKey, Callable[[Task], Any]] = {
    SortKey.CREATED_AT: lambda t: as_utc(t.created_at),
    SortKey.UPDATED_AT: lambda t: as_utc(t.updated_at),
    SortKey.DUE_DATE: lambda t: as_utc(t.due_date),
    SortKey.ADDED_TO_PROJECT_AT: lambda t: as_utc(t.added_to_project_at),
    SortKey.NUMBER: lambda t: t.number,
    SortKey.TITLE: lambda t: t.title.lower(),
    SortKey.STATE: lambda t: t.state.value,
    SortKey.TYPE: lambda t: t.type.value,
    SortKey.STATUS: lambda t: _lower(t.status),
    SortKey.REPOSITORY: lambda t: _lower(t.repository),
    SortKey.PRIORITY: _priority_rank,
}


def sort_tasks(tasks: Iterable[Task], key: SortKey | str, ascending: bool = True) -> list[Task]:
    """Stable sort by ``key``; tasks lacking a value go last in either direction."""
    value_of = SORT_VALUES[SortKey(key)]
    present: list[Task] = []
    missing: list[Task] = []
    for task in tasks:
        (missing if value_of(task) is None else present).append(task)
    # sorted(reverse=True) keeps ties in input order
    present = sorted(present, key=value_of, reverse=not ascending)
    return present + missing


def sort_by_creation_date(tasks: Iterable[Task], ascending: bool = False) -> list[Task]:
    return sort_tasks(tasks, SortKey.CREATED_AT, ascending=ascending)


def sort_by_due_date(tasks: Iterable[Task], ascending: bool = True) -> list[Task]:
    return sort_tasks(tasks, SortKey.DUE_DATE, ascending=ascending)


def filter_by_date_range(
    tasks: Iterable[Task],
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[Task]:
    """Keep tasks created within [start, end]; a missing bound is unbounded.

    Naive bounds or creation times are read as UTC.
    """
    start_ts = as_utc(start)
    end_ts = as_utc(end)
    out: list[Task] = []
    for task in tasks:
        created = as_utc(task.created_at)
        if start_ts is not None and created < start_ts:
            continue
        if end_ts is not None and created > end_ts:
            continue
        out.append(task)
    return out
