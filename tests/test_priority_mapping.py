from task_app.analytics.metrics.priority import priority_bucket
from task_app.core.models import PriorityBucket


def test_priority_bucket():
    assert priority_bucket("P0") is PriorityBucket.P0
    assert priority_bucket("p0") is PriorityBucket.P0
    assert priority_bucket("P1") is PriorityBucket.P1
    assert priority_bucket(" p1 ") is PriorityBucket.NO_PRIORITY
    assert priority_bucket("P0\n") is PriorityBucket.NO_PRIORITY
    assert priority_bucket("P2") is PriorityBucket.NO_PRIORITY
    assert priority_bucket("") is PriorityBucket.NO_PRIORITY
    assert priority_bucket(None) is PriorityBucket.NO_PRIORITY
    assert priority_bucket("P00") is PriorityBucket.NO_PRIORITY
