"""TaskProcessorService: binds a clock and timezone to the analytics functions."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, tzinfo

import pandas as pd

from task_app.analytics.aggregations import grouping
from task_app.analytics.aggregations.assignee import assignee_breakdown, top_assignees
from task_app.analytics.metrics.dates import resolve_timezone
from task_app.analytics.metrics.overdue import is_overdue
from task_app.analytics.metrics.stats import calculate_stats
from task_app.analytics.report import SummaryReport, get_summary_report
from task_app.analytics.segments import ordering

from .config import DEFAULT_TOP_N
from .models import Task, TaskStats

Clock = Callable[[], datetime]

logger = logging.getLogger(__name__)


class TaskProcessorService:
    """Stateless facade over the analytics engine.

    Holds only the reference timezone and a clock so callers can pin "now"
    (tests, batch runs) without threading it through every call.
    """

    def __init__(self, tz: tzinfo | str | None = None, clock: Clock | None = None):
        self._tz = resolve_timezone(tz)
        self._clock = clock or (lambda: datetime.now(tz=self._tz))

    @property
    def tz(self) -> tzinfo:
        return self._tz

    def now(self) -> datetime:
        return self._clock()

    # ------------------ Classification ------------------
    def is_overdue(self, task: Task) -> bool:
        return is_overdue(task, now=self.now(), tz=self._tz)

    # ------------------ Aggregates ------------------
    def calculate_stats(self, tasks: Iterable[Task]) -> TaskStats:
        stats = calculate_stats(tasks, now=self.now(), tz=self._tz)
        logger.debug(
            "Computed stats for %s tasks: open=%s closed=%s overdue=%s",
            stats.total,
            stats.open,
            stats.closed,
            stats.overdue,
        )
        return stats

    def get_summary_report(self, tasks: Iterable[Task]) -> SummaryReport:
        report = get_summary_report(tasks, now=self.now(), tz=self._tz)
        logger.info(
            "Summary report: %s tasks, %s open, %s overdue, %s without ETA",
            report.stats.total,
            report.stats.open,
            report.stats.overdue,
            report.stats.no_eta,
        )
        return report

    def assignee_breakdown(self, tasks: Iterable[Task], top_n: int = DEFAULT_TOP_N) -> pd.DataFrame:
        return top_assignees(assignee_breakdown(tasks), top_n)

    # ------------------ Grouping ------------------
    def segregate_tasks(self, tasks: Iterable[Task]) -> dict[str, list[Task]]:
        return grouping.segregate_tasks(tasks)

    def group_by_repository(self, tasks: Iterable[Task]) -> dict[str, list[Task]]:
        return grouping.group_by_repository(tasks)

    def group_by_assignee(self, tasks: Iterable[Task]) -> dict[str, list[Task]]:
        return grouping.group_by_assignee(tasks)

    def group_by_status(self, tasks: Iterable[Task]) -> dict[str, list[Task]]:
        return grouping.group_by_status(tasks)

    # ------------------ Ordering ------------------
    def sort_by_creation_date(self, tasks: Iterable[Task], ascending: bool = False) -> list[Task]:
        return ordering.sort_by_creation_date(tasks, ascending=ascending)

    def sort_by_due_date(self, tasks: Iterable[Task], ascending: bool = True) -> list[Task]:
        return ordering.sort_by_due_date(tasks, ascending=ascending)

    def filter_by_date_range(
        self,
        tasks: Iterable[Task],
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[Task]:
        return ordering.filter_by_date_range(tasks, start, end)
