"""Summary report composed from statistics and groupings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from typing import Any

from task_app.analytics.aggregations.grouping import (
    group_by_assignee,
    group_by_repository,
    group_by_status,
    group_counts,
)
from task_app.analytics.metrics.stats import calculate_stats
from task_app.core.mappers import task_to_record
from task_app.core.models import PriorityBreakdown, Task, TaskStats


@dataclass(slots=True)
class SummaryReport:
    stats: TaskStats
    by_repository: dict[str, int] = field(default_factory=dict)
    by_assignee: dict[str, int] = field(default_factory=dict)
    by_status: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible form for a service boundary."""
        return {
            "stats": stats_to_dict(self.stats),
            "byRepository": dict(self.by_repository),
            "byAssignee": dict(self.by_assignee),
            "byStatus": dict(self.by_status),
        }


def _breakdown_to_dict(breakdown: PriorityBreakdown) -> dict[str, Any]:
    return {
        "p0": breakdown.p0,
        "p1": breakdown.p1,
        "noPriority": breakdown.no_priority,
        "p0List": [task_to_record(t) for t in breakdown.p0_list],
        "p1List": [task_to_record(t) for t in breakdown.p1_list],
        "noPriorityList": [task_to_record(t) for t in breakdown.no_priority_list],
    }


def stats_to_dict(stats: TaskStats) -> dict[str, Any]:
    return {
        "total": stats.total,
        "open": stats.open,
        "closed": stats.closed,
        "overdue": stats.overdue,
        "overdueList": [task_to_record(t) for t in stats.overdue_list],
        "noTechHandoffETA": stats.no_eta,
        "noTechHandoffETAList": [task_to_record(t) for t in stats.no_eta_list],
        "noTechHandoffETAByPriority": _breakdown_to_dict(stats.no_eta_by_priority),
        "unassignedByPriority": _breakdown_to_dict(stats.unassigned_by_priority),
    }


def get_summary_report(
    tasks: Iterable[Task],
    now: datetime | None = None,
    tz: tzinfo | str | None = None,
) -> SummaryReport:
    snapshot = tuple(tasks)
    return SummaryReport(
        stats=calculate_stats(snapshot, now=now, tz=tz),
        by_repository=group_counts(group_by_repository(snapshot)),
        by_assignee=group_counts(group_by_assignee(snapshot)),
        by_status=group_counts(group_by_status(snapshot)),
    )
