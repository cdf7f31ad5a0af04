"""Segregation and grouping of tasks by dimension."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence

from task_app.core.config import NO_STATUS, UNASSIGNED, UNKNOWN_REPOSITORY
from task_app.core.models import DONE_STATES, Task, TaskState


def segregate_tasks(tasks: Iterable[Task]) -> dict[str, list[Task]]:
    """Split tasks into ``open`` and ``closed`` (CLOSED or MERGED) lists."""
    out: dict[str, list[Task]] = {"open": [], "closed": []}
    for task in tasks:
        if task.state is TaskState.OPEN:
            out["open"].append(task)
        elif task.state in DONE_STATES:
            out["closed"].append(task)
    return out


def _group(tasks: Iterable[Task], keys_for: Callable[[Task], Sequence[str]]) -> dict[str, list[Task]]:
    grouped: dict[str, list[Task]] = {}
    for task in tasks:
        for key in keys_for(task):
            grouped.setdefault(key, []).append(task)
    return grouped


def group_by_repository(tasks: Iterable[Task]) -> dict[str, list[Task]]:
    return _group(tasks, lambda t: (t.repository or UNKNOWN_REPOSITORY,))


def group_by_assignee(tasks: Iterable[Task]) -> dict[str, list[Task]]:
    """Group tasks by assignee.

    A task with several assignees appears once under each of them, so the
    group sizes may sum to more than the number of tasks.
    """
    return _group(tasks, lambda t: tuple(t.assignees) or (UNASSIGNED,))


def group_by_status(tasks: Iterable[Task]) -> dict[str, list[Task]]:
    return _group(tasks, lambda t: (t.status or NO_STATUS,))


def group_counts(grouped: Mapping[str, Sequence[Task]]) -> dict[str, int]:
    return {key: len(items) for key, items in grouped.items()}
