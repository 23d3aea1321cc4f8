"""Task group aggregation."""

from collections.abc import Iterable

from fargate_tasks.core.ecs.models import Task, TaskGroup
from fargate_tasks.core.ecs.started_by import parse_started_by


def aggregate_task_groups(tasks: Iterable[Task]) -> list[TaskGroup]:
    """Count tasks per group, in the order each group is first seen.

    Tasks whose ``startedBy`` marker does not carry a group name are skipped.
    """
    counts: dict[str, int] = {}
    for task in tasks:
        group_name = parse_started_by(task.started_by)
        if group_name is None:
            continue
        counts[group_name] = counts.get(group_name, 0) + 1

    return [TaskGroup(name=name, instances=count) for name, count in counts.items()]
