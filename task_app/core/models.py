"""Domain data models for project tasks and derived statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class TaskType(str, Enum):
    ISSUE = "ISSUE"
    PULL_REQUEST = "PULL_REQUEST"
    DRAFT_ISSUE = "DRAFT_ISSUE"


class TaskState(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    MERGED = "MERGED"


# Terminal states; OPEN is the only active state.
DONE_STATES: frozenset[TaskState] = frozenset({TaskState.CLOSED, TaskState.MERGED})


class PriorityBucket(str, Enum):
    P0 = "P0"
    P1 = "P1"
    NO_PRIORITY = "NO_PRIORITY"


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    number: int
    type: TaskType
    state: TaskState
    status: str | None
    repository: str | None
    created_at: datetime
    updated_at: datetime
    assignees: tuple[str, ...] = ()
    priority: str | None = None
    # First Tech Handoff ETA date
    due_date: datetime | None = None
    added_to_project_at: datetime | None = None

    @property
    def is_open(self) -> bool:
        return self.state is TaskState.OPEN

    @property
    def is_done(self) -> bool:
        return self.state in DONE_STATES

    @property
    def is_unassigned(self) -> bool:
        return len(self.assignees) == 0


@dataclass(frozen=True, slots=True)
class PriorityBreakdown:
    """Partition of a task list into P0 / P1 / no-priority sublists."""

    p0_list: tuple[Task, ...] = ()
    p1_list: tuple[Task, ...] = ()
    no_priority_list: tuple[Task, ...] = ()

    @property
    def p0(self) -> int:
        return len(self.p0_list)

    @property
    def p1(self) -> int:
        return len(self.p1_list)

    @property
    def no_priority(self) -> int:
        return len(self.no_priority_list)

    @property
    def total(self) -> int:
        return self.p0 + self.p1 + self.no_priority


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int = 0
    open: int = 0
    closed: int = 0
    overdue_list: tuple[Task, ...] = ()
    no_eta_list: tuple[Task, ...] = ()
    no_eta_by_priority: PriorityBreakdown = field(default_factory=PriorityBreakdown)
    unassigned_by_priority: PriorityBreakdown = field(default_factory=PriorityBreakdown)

    # Derived counts
    @property
    def overdue(self) -> int:
        return len(self.overdue_list)

    @property
    def no_eta(self) -> int:
        return len(self.no_eta_list)
