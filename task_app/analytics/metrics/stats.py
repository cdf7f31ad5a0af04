"""Aggregate task statistics (pure functions)."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, tzinfo

from task_app.core.models import DONE_STATES, Task, TaskState, TaskStats

from .dates import now_in, resolve_timezone
from .overdue import is_overdue
from .priority import split_by_priority


def calculate_stats(
    tasks: Iterable[Task],
    now: datetime | None = None,
    tz: tzinfo | str | None = None,
) -> TaskStats:
    """Compute a TaskStats snapshot for the collection.

    Only OPEN tasks count towards the ETA and unassigned gaps. Tasks in a
    state that is neither OPEN nor terminal are excluded from both the open
    and closed counts.
    """
    snapshot = tuple(tasks)
    zone = resolve_timezone(tz)
    # Pin "now" once so every task is classified against the same day
    now = now if now is not None else now_in(zone)

    open_tasks = [t for t in snapshot if t.state is TaskState.OPEN]
    closed_count = sum(1 for t in snapshot if t.state in DONE_STATES)

    overdue_list = tuple(t for t in snapshot if is_overdue(t, now=now, tz=zone))
    no_eta_list = tuple(t for t in open_tasks if t.due_date is None)
    unassigned = [t for t in open_tasks if t.is_unassigned]

    return TaskStats(
        total=len(snapshot),
        open=len(open_tasks),
        closed=closed_count,
        overdue_list=overdue_list,
        no_eta_list=no_eta_list,
        no_eta_by_priority=split_by_priority(no_eta_list),
        unassigned_by_priority=split_by_priority(unassigned),
    )
