from datetime import UTC, datetime

from task_app.analytics.aggregations.assignee import assignee_breakdown, top_assignees
from task_app.core.models import Task, TaskState, TaskType
from task_app.visual.charts import assignee_breakdown_chart

BASE = datetime(2024, 12, 1, 10, 0, tzinfo=UTC)


def _task(i, assignees=(), state=TaskState.OPEN):
    return Task(
        id=f"T_{i}",
        title=f"Task {i}",
        number=i,
        type=TaskType.ISSUE,
        state=state,
        status="Todo",
        repository="org/repo",
        created_at=BASE,
        updated_at=BASE,
        assignees=tuple(assignees),
    )


def _sample_tasks():
    return [
        _task(1, ["alice"]),
        _task(2, ["alice", "bob"]),
        _task(3),
        _task(4, ["carol"], state=TaskState.CLOSED),
    ]


def test_assignee_breakdown_counts_open_tasks():
    out = assignee_breakdown(_sample_tasks())
    assert list(out.columns) == ["assignee", "count", "percentage"]
    assert list(out["assignee"]) == ["alice", "bob", "Unassigned"]
    assert list(out["count"]) == [2, 1, 1]
    assert list(out["percentage"]) == [66.7, 33.3, 33.3]
    assert "carol" not in set(out["assignee"])


def test_top_assignees_collapses_remainder():
    out = top_assignees(assignee_breakdown(_sample_tasks()), top_n=1)
    assert list(out["assignee"]) == ["alice", "Others (2)"]
    assert list(out["count"]) == [2, 2]
    untouched = top_assignees(assignee_breakdown(_sample_tasks()), top_n=10)
    assert len(untouched) == 3


def test_assignee_breakdown_empty():
    out = assignee_breakdown([_task(1, state=TaskState.CLOSED)])
    assert out.empty
    assert "count" in out.columns
    assert assignee_breakdown_chart(out) is None


def test_assignee_breakdown_chart():
    chart = assignee_breakdown_chart(top_assignees(assignee_breakdown(_sample_tasks()), top_n=1))
    assert chart is not None
