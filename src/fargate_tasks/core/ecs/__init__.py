"""AWS ECS task helpers."""

from fargate_tasks.core.ecs.assembler import assemble_task, task_id_from_arn
from fargate_tasks.core.ecs.attachments import extract_attachment_details
from fargate_tasks.core.ecs.definitions import TaskDefinitionCache
from fargate_tasks.core.ecs.environment import merge_environment
from fargate_tasks.core.ecs.errors import EcsTaskError
from fargate_tasks.core.ecs.models import (
    EnvVar,
    RunTaskInput,
    Task,
    TaskDefinitionInfo,
    TaskFilter,
    TaskGroup,
)
from fargate_tasks.core.ecs.session import create_session
from fargate_tasks.core.ecs.started_by import format_started_by, parse_started_by
from fargate_tasks.core.ecs.task_groups import aggregate_task_groups
from fargate_tasks.core.ecs.tasks import TaskManager

__all__ = [
    "EcsTaskError",
    "EnvVar",
    "RunTaskInput",
    "Task",
    "TaskDefinitionCache",
    "TaskDefinitionInfo",
    "TaskFilter",
    "TaskGroup",
    "TaskManager",
    "aggregate_task_groups",
    "assemble_task",
    "create_session",
    "extract_attachment_details",
    "format_started_by",
    "merge_environment",
    "parse_started_by",
    "task_id_from_arn",
]
