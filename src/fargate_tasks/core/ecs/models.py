"""Data models for ECS tasks."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from fargate_tasks.core.ecs.started_by import parse_started_by


@dataclass(frozen=True)
class EnvVar:
    """A single container environment variable."""

    key: str
    value: str

    @classmethod
    def parse(cls, text: str) -> "EnvVar":
        """Parse a ``KEY=VALUE`` string."""
        key, sep, value = text.partition("=")
        if not sep or not key:
            raise ValueError(f"Environment variable '{text}' must be in KEY=VALUE form.")
        return cls(key=key, value=value)


@dataclass(frozen=True)
class Task:
    """Point-in-time view of one running ECS task."""

    task_id: str
    cpu: str = ""
    memory: str = ""
    created_at: datetime | None = None
    desired_status: str = ""
    last_status: str = ""
    image: str = ""
    task_role: str = ""
    command: tuple[str, ...] = ()
    env_vars: tuple[EnvVar, ...] = ()
    eni_id: str = ""
    subnet_id: str = ""
    started_by: str = ""
    deployment_id: str = ""

    @property
    def task_group(self) -> str | None:
        """Return the logical group this task was started in, if any."""
        return parse_started_by(self.started_by)

    def running_for(self, now: datetime | None = None) -> timedelta:
        """Return how long the task has existed, truncated to whole seconds."""
        if self.created_at is None:
            return timedelta(0)
        current = now or datetime.now(UTC)
        elapsed = current - self.created_at
        return timedelta(seconds=int(elapsed.total_seconds()))


@dataclass(frozen=True)
class TaskGroup:
    """Tasks sharing a launch name, with the number currently running."""

    name: str
    instances: int


@dataclass(frozen=True)
class TaskDefinitionInfo:
    """The parts of a task definition a task view needs."""

    arn: str
    image: str = ""
    task_role: str = ""
    environment: tuple[EnvVar, ...] = ()
    revision: str = ""


@dataclass(frozen=True)
class TaskFilter:
    """Filter for a task listing call."""

    cluster_name: str
    service_name: str | None = None
    started_by: str | None = None
    launch_type: str | None = None


@dataclass
class RunTaskInput:
    """A one-off launch request."""

    cluster_name: str
    task_definition_arn: str
    task_name: str
    count: int = 1
    command: list[str] = field(default_factory=list)
    env_vars: list[EnvVar] = field(default_factory=list)
    security_group_ids: list[str] = field(default_factory=list)
    subnet_ids: list[str] = field(default_factory=list)
