"""Encoding of task group names in the ECS ``startedBy`` field.

ECS has no notion of a group of one-off tasks, so the group name is written
into ``startedBy`` at launch time and read back from it when listing. The
``fargate:`` prefix is shared with every other client launching into the same
cluster and must not change.
"""

import re

STARTED_BY_PREFIX = "fargate:"
STARTED_BY_PATTERN = re.compile(r"fargate:(.*)")


def format_started_by(group_name: str) -> str:
    """Return the ``startedBy`` marker for a task group."""
    return f"{STARTED_BY_PREFIX}{group_name}"


def parse_started_by(started_by: str | None) -> str | None:
    """Return the task group encoded in a ``startedBy`` marker, if any."""
    if not started_by:
        return None
    match = STARTED_BY_PATTERN.match(started_by)
    if match is None:
        return None
    return match.group(1)
