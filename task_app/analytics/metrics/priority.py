"""Priority bucketing shared by every priority-split statistic."""

from __future__ import annotations

from collections.abc import Iterable

from task_app.core.config import PRIORITY_P0, PRIORITY_P1
from task_app.core.models import PriorityBreakdown, PriorityBucket, Task


def priority_bucket(priority: str | None) -> PriorityBucket:
    """Classify a raw priority string into P0, P1 or NO_PRIORITY.

    >>> priority_bucket("p0")
    <PriorityBucket.P0: 'P0'>
    >>> priority_bucket("P2")
    <PriorityBucket.NO_PRIORITY: 'NO_PRIORITY'>
    """
    if not priority:
        return PriorityBucket.NO_PRIORITY
    token = str(priority).upper()
    if token == PRIORITY_P0:
        return PriorityBucket.P0
    if token == PRIORITY_P1:
        return PriorityBucket.P1
    return PriorityBucket.NO_PRIORITY


def split_by_priority(tasks: Iterable[Task]) -> PriorityBreakdown:
    """Partition tasks by priority bucket, preserving input order."""
    buckets: dict[PriorityBucket, list[Task]] = {bucket: [] for bucket in PriorityBucket}
    for task in tasks:
        buckets[priority_bucket(task.priority)].append(task)
    return PriorityBreakdown(
        p0_list=tuple(buckets[PriorityBucket.P0]),
        p1_list=tuple(buckets[PriorityBucket.P1]),
        no_priority_list=tuple(buckets[PriorityBucket.NO_PRIORITY]),
    )
