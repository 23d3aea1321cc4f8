"""fargate-tasks - inspect, launch and stop ECS Fargate tasks."""

from fargate_tasks.core.ecs import (
    EcsTaskError,
    EnvVar,
    RunTaskInput,
    Task,
    TaskGroup,
    TaskManager,
)
from fargate_tasks.core.settings import FargateSettings, get_settings

__all__ = [
    "EcsTaskError",
    "EnvVar",
    "FargateSettings",
    "RunTaskInput",
    "Task",
    "TaskGroup",
    "TaskManager",
    "get_settings",
]
