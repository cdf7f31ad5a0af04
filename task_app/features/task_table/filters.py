"""Table query state and the pure functions that apply it."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime, tzinfo

from task_app.analytics.metrics.dates import now_in, resolve_timezone
from task_app.analytics.metrics.overdue import is_overdue
from task_app.analytics.segments.ordering import SortKey, sort_tasks
from task_app.core.config import DEFAULT_PAGE_SIZE, FILTER_ALL, SETTINGS, UNASSIGNED
from task_app.core.models import Task


@dataclass(frozen=True, slots=True)
class TaskTableFilters:
    """Selections owned by the presentation layer.

    Every string filter accepts ``"all"`` to disable it. ``assignee`` also
    accepts ``"unassigned"`` to select tasks nobody is assigned to.
    """

    state: str = FILTER_ALL
    task_type: str = FILTER_ALL
    status: str = FILTER_ALL
    repository: str = FILTER_ALL
    assignee: str = FILTER_ALL
    search: str = ""
    overdue_only: bool = False
    sort_key: SortKey = SortKey.CREATED_AT
    ascending: bool = False
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def has_active_filters(self) -> bool:
        return (
            any(
                value != FILTER_ALL
                for value in (self.state, self.task_type, self.status, self.repository, self.assignee)
            )
            or self.search != ""
        )

    def cleared(self) -> TaskTableFilters:
        """Reset filters and search; sorting and page size survive, page resets to 1."""
        return replace(
            self,
            state=FILTER_ALL,
            task_type=FILTER_ALL,
            status=FILTER_ALL,
            repository=FILTER_ALL,
            assignee=FILTER_ALL,
            search="",
            page=1,
        )


@dataclass(frozen=True, slots=True)
class FilterOptions:
    repositories: list[str] = field(default_factory=list)
    statuses: list[str] = field(default_factory=list)
    assignees: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Page:
    items: list[Task]
    page: int
    page_size: int
    total_items: int
    total_pages: int


def filter_options(tasks: Iterable[Task]) -> FilterOptions:
    repos: set[str] = set()
    statuses: set[str] = set()
    assignees: set[str] = set()
    for task in tasks:
        if task.repository:
            repos.add(task.repository)
        if task.status:
            statuses.add(task.status)
        assignees.update(a for a in task.assignees if a)
    return FilterOptions(sorted(repos), sorted(statuses), sorted(assignees))


def matches_search(task: Task, query: str) -> bool:
    """Case-insensitive match on title, number, repository or any assignee."""
    if not query:
        return True
    q = query.lower()
    return (
        q in task.title.lower()
        or q in str(task.number)
        or (task.repository is not None and q in task.repository.lower())
        or any(q in a.lower() for a in task.assignees)
    )


def _matches_assignee(task: Task, assignee: str) -> bool:
    if assignee == FILTER_ALL:
        return True
    if assignee == UNASSIGNED:
        return task.is_unassigned
    return assignee in task.assignees


def apply_filters(
    tasks: Iterable[Task],
    filters: TaskTableFilters,
    now: datetime | None = None,
    tz: tzinfo | str | None = None,
) -> list[Task]:
    zone = resolve_timezone(tz)
    now = now if now is not None else now_in(zone)
    out: list[Task] = []
    for task in tasks:
        if filters.overdue_only and not is_overdue(task, now=now, tz=zone):
            continue
        if filters.state != FILTER_ALL and task.state.value != filters.state:
            continue
        if filters.task_type != FILTER_ALL and task.type.value != filters.task_type:
            continue
        if filters.status != FILTER_ALL and task.status != filters.status:
            continue
        if filters.repository != FILTER_ALL and task.repository != filters.repository:
            continue
        if not _matches_assignee(task, filters.assignee):
            continue
        if not matches_search(task, filters.search):
            continue
        out.append(task)
    return out


def paginate(tasks: Sequence[Task], page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Page:
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    page_size = min(page_size, SETTINGS.max_table_rows)
    total_items = len(tasks)
    total_pages = max(1, math.ceil(total_items / page_size))
    page = min(max(page, 1), total_pages)
    start = (page - 1) * page_size
    return Page(
        items=list(tasks[start : start + page_size]),
        page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
    )


def query_tasks(
    tasks: Iterable[Task],
    filters: TaskTableFilters,
    now: datetime | None = None,
    tz: tzinfo | str | None = None,
) -> list[Task]:
    """Filter then sort according to ``filters`` (no pagination)."""
    filtered = apply_filters(tasks, filters, now=now, tz=tz)
    return sort_tasks(filtered, filters.sort_key, ascending=filters.ascending)
