"""Assembly of task views from ECS task records."""

from typing import Any

from fargate_tasks.core.ecs.attachments import (
    extract_attachment_details,
    first_attachment_details,
)
from fargate_tasks.core.ecs.environment import env_vars_from_pairs, merge_environment
from fargate_tasks.core.ecs.models import Task, TaskDefinitionInfo


def task_id_from_arn(task_arn: str) -> str:
    """Return the task ID, the last path segment of a task ARN."""
    return task_arn.rsplit("/", 1)[-1]


def first_container_override(record: dict[str, Any]) -> dict[str, Any] | None:
    """Return the first container override of a task record, if any."""
    overrides = (record.get("overrides") or {}).get("containerOverrides") or []
    if not overrides:
        return None
    return overrides[0]


def assemble_task(
    record: dict[str, Any],
    definition: TaskDefinitionInfo,
    override: dict[str, Any] | None,
) -> Task:
    """Build a task view from its runtime record, definition and override.

    Override environment wins over the definition's declared environment. The
    command is only taken from the override; the definition's own command is
    not consulted.
    """
    override = override or {}
    eni_id, subnet_id = extract_attachment_details(first_attachment_details(record))
    command = override.get("command") or []

    return Task(
        task_id=task_id_from_arn(str(record.get("taskArn", ""))),
        cpu=str(record.get("cpu", "")),
        memory=str(record.get("memory", "")),
        created_at=record.get("createdAt"),
        desired_status=str(record.get("desiredStatus", "")),
        last_status=str(record.get("lastStatus", "")),
        image=definition.image,
        task_role=definition.task_role,
        command=tuple(str(part) for part in command),
        env_vars=merge_environment(
            definition.environment,
            env_vars_from_pairs(override.get("environment")),
        ),
        eni_id=eni_id,
        subnet_id=subnet_id,
        started_by=str(record.get("startedBy", "")),
        deployment_id=definition.revision,
    )
