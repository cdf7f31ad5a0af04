"""Assignee workload breakdown over open tasks."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from task_app.core.config import DEFAULT_TOP_N, UNASSIGNED_LABEL
from task_app.core.models import Task, TaskState

BREAKDOWN_COLUMNS = ["assignee", "count", "percentage"]


def assignee_breakdown(tasks: Iterable[Task]) -> pd.DataFrame:
    """Count open tasks per assignee with their share of all open tasks.

    Multi-assignee tasks count once per assignee, so percentages may sum to
    more than 100. Rows are ordered by count descending; ties keep first-seen
    order.
    """
    open_tasks = [t for t in tasks if t.state is TaskState.OPEN]
    if not open_tasks:
        return pd.DataFrame(columns=BREAKDOWN_COLUMNS)
    rows = [{"assignee": name} for t in open_tasks for name in (t.assignees or (UNASSIGNED_LABEL,))]
    out = (
        pd.DataFrame(rows)
        .groupby("assignee", sort=False)
        .size()
        .reset_index(name="count")
        .sort_values("count", ascending=False, kind="stable")
        .reset_index(drop=True)
    )
    out["percentage"] = (out["count"] / len(open_tasks) * 100).round(1)
    return out[BREAKDOWN_COLUMNS]


def top_assignees(breakdown: pd.DataFrame, top_n: int = DEFAULT_TOP_N) -> pd.DataFrame:
    """Keep the first ``top_n`` rows and collapse the rest into "Others (k)"."""
    if breakdown.empty or len(breakdown) <= top_n:
        return breakdown
    head = breakdown.head(top_n)
    rest = breakdown.iloc[top_n:]
    others = pd.DataFrame(
        [
            {
                "assignee": f"Others ({len(rest)})",
                "count": int(rest["count"].sum()),
                "percentage": round(float(rest["percentage"].sum()), 1),
            }
        ]
    )
    return pd.concat([head, others], ignore_index=True)
