"""Overdue classification (pure functions)."""

from __future__ import annotations

from datetime import datetime, tzinfo

from task_app.core.models import Task, TaskState

from .dates import local_day, now_in, resolve_timezone


def is_overdue(
    task: Task,
    now: datetime | None = None,
    tz: tzinfo | str | None = None,
) -> bool:
    """Return True when an open task's due day has arrived or passed.

    Both the due date and ``now`` are truncated to their calendar day in the
    reference timezone, so a task due "today" is overdue from the start of
    that day regardless of the time-of-day component.

    Parameters
    ----------
    task : Task
        Task to classify.
    now : datetime, optional
        Reference instant. Defaults to the current time in ``tz``.
    tz : tzinfo or str, optional
        Reference timezone for the day boundary. Defaults to
        ``config.TIMEZONE``.
    """
    if task.due_date is None:
        return False
    if task.state is not TaskState.OPEN:
        return False
    zone = resolve_timezone(tz)
    today = local_day(now if now is not None else now_in(zone), zone)
    return local_day(task.due_date, zone) <= today
