import logging
from datetime import UTC, datetime, timedelta

import pytz

from task_app.core.models import Task, TaskState, TaskType
from task_app.core.service import TaskProcessorService

NOW = datetime(2024, 9, 10, 12, 0, tzinfo=UTC)


def _task(i, due_days=None, state=TaskState.OPEN, assignees=()):
    return Task(
        id=f"T_{i}",
        title=f"Task {i}",
        number=i,
        type=TaskType.ISSUE,
        state=state,
        status=None,
        repository="org/repo",
        created_at=NOW - timedelta(days=i),
        updated_at=NOW,
        assignees=tuple(assignees),
        due_date=NOW + timedelta(days=due_days) if due_days is not None else None,
    )


def test_service_uses_injected_clock():
    svc = TaskProcessorService(tz="UTC", clock=lambda: NOW)
    assert svc.now() == NOW
    assert svc.is_overdue(_task(1, due_days=-1))
    assert not svc.is_overdue(_task(2, due_days=1))
    later = TaskProcessorService(tz="UTC", clock=lambda: NOW + timedelta(days=2))
    assert later.is_overdue(_task(2, due_days=1))


def test_service_timezone_resolution():
    svc = TaskProcessorService(tz="America/Santiago")
    assert svc.tz == pytz.timezone("America/Santiago")
    assert svc.now().tzinfo is not None


def test_service_summary_report_logs(caplog):
    caplog.set_level(logging.INFO, logger="task_app.core.service")
    svc = TaskProcessorService(tz="UTC", clock=lambda: NOW)
    tasks = [_task(1, due_days=-1, assignees=["alice"]), _task(2), _task(3, state=TaskState.CLOSED)]
    report = svc.get_summary_report(tasks)
    assert report.stats.overdue == 1
    assert report.by_assignee == {"alice": 1, "unassigned": 2}
    assert "Summary report: 3 tasks" in caplog.text


def test_service_delegates_grouping_and_ordering():
    svc = TaskProcessorService(tz="UTC", clock=lambda: NOW)
    tasks = [_task(1, due_days=5), _task(2), _task(3, due_days=1, state=TaskState.MERGED)]
    assert [t.number for t in svc.segregate_tasks(tasks)["closed"]] == [3]
    assert [t.number for t in svc.sort_by_due_date(tasks)] == [3, 1, 2]
    assert [t.number for t in svc.sort_by_creation_date(tasks)] == [1, 2, 3]
    assert list(svc.group_by_repository(tasks)) == ["org/repo"]
    assert list(svc.group_by_status(tasks)) == ["no-status"]
    assert list(svc.group_by_assignee(tasks)) == ["unassigned"]
    window = svc.filter_by_date_range(tasks, start=NOW - timedelta(days=2), end=NOW)
    assert [t.number for t in window] == [1, 2]
    assert svc.calculate_stats(tasks).closed == 1
    assert list(svc.assignee_breakdown(tasks)["assignee"]) == ["Unassigned"]
