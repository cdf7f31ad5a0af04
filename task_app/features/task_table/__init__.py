"""Task table feature module: filtering, search, sorting and pagination."""

from task_app.features.task_table.context import TaskTableContext, build_table_context
from task_app.features.task_table.filters import (
    FilterOptions,
    Page,
    TaskTableFilters,
    apply_filters,
    filter_options,
    matches_search,
    paginate,
    query_tasks,
)

__all__ = [
    "FilterOptions",
    "Page",
    "TaskTableContext",
    "TaskTableFilters",
    "apply_filters",
    "build_table_context",
    "filter_options",
    "matches_search",
    "paginate",
    "query_tasks",
]
