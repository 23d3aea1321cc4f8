"""Task definition lookups."""

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from fargate_tasks.core.ecs.environment import env_vars_from_pairs
from fargate_tasks.core.ecs.errors import EcsTaskError
from fargate_tasks.core.ecs.models import TaskDefinitionInfo

logger = logging.getLogger(__name__)


class TaskDefinitionCache:
    """Describe task definitions once per ARN.

    Task definitions are immutable per revision, so a cached entry never
    goes stale.
    """

    def __init__(self, client: Any) -> None:
        """Wrap an ECS client."""
        self._client = client
        self._definitions: dict[str, TaskDefinitionInfo] = {}

    def get(self, task_definition_arn: str) -> TaskDefinitionInfo:
        """Return the task definition for an ARN, describing it on first use."""
        cached = self._definitions.get(task_definition_arn)
        if cached is not None:
            return cached

        logger.debug(f"Describing task definition {task_definition_arn}")
        try:
            response = self._client.describe_task_definition(taskDefinition=task_definition_arn)
        except (ClientError, BotoCoreError) as exc:
            raise EcsTaskError(
                "describe task definition",
                f"Failed to describe task definition {task_definition_arn}: {exc}",
            ) from exc

        definition = task_definition_from_response(
            task_definition_arn, response.get("taskDefinition", {})
        )
        self._definitions[task_definition_arn] = definition
        return definition


def task_definition_from_response(arn: str, data: dict[str, Any]) -> TaskDefinitionInfo:
    """Build task definition info from a ``describe_task_definition`` payload."""
    containers = data.get("containerDefinitions") or []
    first = containers[0] if containers else {}
    revision = data.get("revision")
    return TaskDefinitionInfo(
        arn=str(data.get("taskDefinitionArn") or arn),
        image=str(first.get("image", "")),
        task_role=str(data.get("taskRoleArn", "")),
        environment=env_vars_from_pairs(first.get("environment")),
        revision=str(revision) if revision is not None else task_definition_revision(arn),
    )


def task_definition_revision(task_definition_arn: str) -> str:
    """Return the revision from a ``family:revision`` task definition reference."""
    reference = task_definition_arn.rsplit("/", 1)[-1]
    _, sep, revision = reference.rpartition(":")
    return revision if sep else ""
