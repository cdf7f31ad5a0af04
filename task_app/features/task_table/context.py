"""Pure helpers to build task table context for testing (no Streamlit)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, tzinfo

import pandas as pd

from task_app.core.column_config import get_columns
from task_app.core.mappers import tasks_to_dataframe
from task_app.core.models import Task
from task_app.features.task_table import filters as tt


@dataclass(slots=True)
class TaskTableContext:
    """Context data for a task table view."""

    filters: tt.TaskTableFilters
    options: tt.FilterOptions
    page: tt.Page
    filtered_count: int = 0
    total_count: int = 0
    rows: pd.DataFrame = field(default_factory=pd.DataFrame)


def build_table_context(
    tasks: Iterable[Task],
    filters: tt.TaskTableFilters | None = None,
    now: datetime | None = None,
    tz: tzinfo | str | None = None,
    column_set: str = "table",
) -> TaskTableContext:
    """Build context for a task table.

    Filter options are taken from the full collection so selections stay
    available while other filters narrow the rows.

    Parameters
    ----------
    tasks : iterable of Task
        Full task collection.
    filters : TaskTableFilters, optional
        Current selections; defaults to no filtering, newest first.
    now, tz : optional
        Reference clock and timezone for the overdue-only view.
    column_set : str
        Column set (see ``columns.yaml``) used for the ``rows`` frame.

    Returns
    -------
    TaskTableContext
        Options, current page and the page rendered as a DataFrame.
    """
    snapshot = tuple(tasks)
    filters = filters or tt.TaskTableFilters()
    ordered = tt.query_tasks(snapshot, filters, now=now, tz=tz)
    page = tt.paginate(ordered, filters.page, filters.page_size)

    rows = tasks_to_dataframe(page.items)
    columns = [c for c in get_columns(column_set) if c in rows.columns]
    if columns:
        rows = rows[columns]

    return TaskTableContext(
        filters=filters,
        options=tt.filter_options(snapshot),
        page=page,
        filtered_count=len(ordered),
        total_count=len(snapshot),
        rows=rows,
    )
