"""Central configuration, constants, and shared column definitions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# =============================================================================
# Time Settings
# =============================================================================
# Reference timezone for calendar-day comparisons (overdue detection).
TIMEZONE = "UTC"

# =============================================================================
# Grouping Sentinels
# =============================================================================
UNKNOWN_REPOSITORY = "unknown"
UNASSIGNED = "unassigned"
NO_STATUS = "no-status"

# Display label used by the assignee breakdown (capitalized for charts)
UNASSIGNED_LABEL = "Unassigned"

# =============================================================================
# Priority Configuration
# =============================================================================
# Only these tokens are recognized (case-insensitive); anything else is
# treated as "no priority".
PRIORITY_P0 = "P0"
PRIORITY_P1 = "P1"

# =============================================================================
# Table Query Defaults
# =============================================================================
FILTER_ALL = "all"
DEFAULT_PAGE_SIZE: int = 25
DEFAULT_TOP_N: int = 10  # Assignees shown before collapsing into "Others"

# =============================================================================
# Table Column Sets
# =============================================================================
TASK_CORE_COLUMNS: Sequence[str] = (
    "id",
    "number",
    "title",
    "type",
    "state",
    "status",
    "repository",
    "assignees",
    "priority",
    "created_at",
    "updated_at",
    "due_date",
    "added_to_project_at",
)

TASK_TABLE_COLUMNS: Sequence[str] = (
    "number",
    "title",
    "type",
    "state",
    "status",
    "repository",
    "assignees",
    "priority",
    "due_date",
    "created_at",
)

OVERDUE_TABLE_COLUMNS: Sequence[str] = (
    "number",
    "title",
    "repository",
    "assignees",
    "priority",
    "due_date",
)


@dataclass(slots=True)
class AppSettings:
    # Upper bound for a single table page
    max_table_rows: int = 1000


SETTINGS = AppSettings()
