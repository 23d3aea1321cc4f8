"""Listing, launching and stopping ECS tasks."""

import logging
from typing import Any

from boto3.session import Session
from botocore.exceptions import BotoCoreError, ClientError

from fargate_tasks.core.ecs.assembler import assemble_task, first_container_override
from fargate_tasks.core.ecs.definitions import TaskDefinitionCache
from fargate_tasks.core.ecs.environment import env_vars_to_pairs
from fargate_tasks.core.ecs.errors import EcsTaskError
from fargate_tasks.core.ecs.models import RunTaskInput, Task, TaskFilter, TaskGroup
from fargate_tasks.core.ecs.started_by import format_started_by
from fargate_tasks.core.ecs.task_groups import aggregate_task_groups

logger = logging.getLogger(__name__)

LAUNCH_TYPE_FARGATE = "FARGATE"


class TaskManager:
    """Task operations against one ECS cluster."""

    def __init__(self, client: Any, cluster_name: str) -> None:
        """Wrap an ECS client for a cluster."""
        self._client = client
        self.cluster_name = cluster_name
        self._definitions = TaskDefinitionCache(client)

    @classmethod
    def from_session(cls, session: Session, cluster_name: str) -> "TaskManager":
        """Create a task manager from a boto3 session."""
        return cls(session.client("ecs"), cluster_name)

    def list_tasks_for_service(self, service_name: str) -> list[Task]:
        """List the Fargate tasks of a service."""
        return self._list_tasks(
            TaskFilter(
                cluster_name=self.cluster_name,
                service_name=service_name,
                launch_type=LAUNCH_TYPE_FARGATE,
            )
        )

    def list_tasks_for_group(self, group_name: str) -> list[Task]:
        """List the tasks started under a task group name."""
        return self._list_tasks(
            TaskFilter(
                cluster_name=self.cluster_name,
                started_by=format_started_by(group_name),
            )
        )

    def list_tasks(self) -> list[Task]:
        """List every task in the cluster."""
        return self._list_tasks(TaskFilter(cluster_name=self.cluster_name))

    def list_task_groups(self) -> list[TaskGroup]:
        """List task groups in the cluster with their running instance counts."""
        return aggregate_task_groups(self.list_tasks())

    def describe_tasks(self, task_ids: list[str]) -> list[Task]:
        """Describe tasks by ID or ARN.

        Tasks that no longer exist are left out, so the result can be shorter
        than the input. At most 100 IDs may be passed per call.
        """
        if not task_ids:
            return []

        try:
            response = self._client.describe_tasks(cluster=self.cluster_name, tasks=task_ids)
        except (ClientError, BotoCoreError) as exc:
            raise EcsTaskError("describe", f"Failed to describe ECS tasks: {exc}") from exc

        failures = response.get("failures", [])
        if failures:
            logger.debug(f"Tasks not found while describing: {failures}")

        tasks = []
        for record in response.get("tasks", []):
            definition = self._definitions.get(str(record.get("taskDefinitionArn", "")))
            tasks.append(assemble_task(record, definition, first_container_override(record)))
        return tasks

    def run_task(self, run_input: RunTaskInput) -> list[str]:
        """Launch tasks for a task group and return the started task ARNs."""
        request: dict[str, Any] = {
            "cluster": run_input.cluster_name,
            "count": run_input.count,
            "taskDefinition": run_input.task_definition_arn,
            "launchType": LAUNCH_TYPE_FARGATE,
            "startedBy": format_started_by(run_input.task_name),
            "networkConfiguration": {
                "awsvpcConfiguration": {
                    "subnets": run_input.subnet_ids,
                    "securityGroups": run_input.security_group_ids,
                    "assignPublicIp": "ENABLED",
                }
            },
        }
        container_override = build_container_override(run_input)
        if container_override:
            request["overrides"] = {"containerOverrides": [container_override]}

        logger.info(
            f"Running {run_input.count} task(s) of {run_input.task_definition_arn} "
            f"as {run_input.task_name} in {run_input.cluster_name}"
        )
        try:
            response = self._client.run_task(**request)
        except (ClientError, BotoCoreError) as exc:
            raise EcsTaskError("run", f"Failed to run ECS task: {exc}") from exc

        task_arns = [str(task["taskArn"]) for task in response.get("tasks", [])]
        failures = response.get("failures", [])
        if not task_arns and failures:
            raise EcsTaskError("run", f"Failed to run ECS task: {failures}")
        return task_arns

    def stop_tasks(self, task_ids: list[str]) -> None:
        """Stop tasks one at a time, in order, giving up at the first failure."""
        for task_id in task_ids:
            self.stop_task(task_id)

    def stop_task(self, task_id: str) -> None:
        """Stop a single task."""
        logger.info(f"Stopping task {task_id} in {self.cluster_name}")
        try:
            self._client.stop_task(cluster=self.cluster_name, task=task_id)
        except (ClientError, BotoCoreError) as exc:
            raise EcsTaskError("stop", f"Failed to stop ECS task {task_id}: {exc}") from exc

    def _list_tasks(self, task_filter: TaskFilter) -> list[Task]:
        """List every task matching a filter, across all pages."""
        batches = self._list_task_arn_batches(task_filter)

        # Describe only after paging completes; each page fits one describe call.
        tasks: list[Task] = []
        for batch in batches:
            tasks.extend(self.describe_tasks(batch))
        return tasks

    def _list_task_arn_batches(self, task_filter: TaskFilter) -> list[list[str]]:
        """Return the non-empty pages of task ARNs for a filter."""
        kwargs: dict[str, Any] = {"cluster": task_filter.cluster_name}
        if task_filter.service_name:
            kwargs["serviceName"] = task_filter.service_name
        if task_filter.started_by:
            kwargs["startedBy"] = task_filter.started_by
        if task_filter.launch_type:
            kwargs["launchType"] = task_filter.launch_type

        batches: list[list[str]] = []
        try:
            paginator = self._client.get_paginator("list_tasks")
            for page in paginator.paginate(**kwargs):
                task_arns = page.get("taskArns", [])
                if task_arns:
                    batches.append(list(task_arns))
        except (ClientError, BotoCoreError) as exc:
            raise EcsTaskError("list", f"Failed to list ECS tasks: {exc}") from exc

        total = sum(len(batch) for batch in batches)
        logger.debug(f"Listed {total} task(s) in {len(batches)} page(s)")
        return batches


def build_container_override(run_input: RunTaskInput) -> dict[str, Any] | None:
    """Return the container override for a launch, or None when nothing is overridden."""
    if not run_input.command and not run_input.env_vars:
        return None

    override: dict[str, Any] = {"name": run_input.task_name}
    if run_input.command:
        override["command"] = list(run_input.command)
    if run_input.env_vars:
        override["environment"] = env_vars_to_pairs(run_input.env_vars)
    return override
