"""Tests for building task views from ECS records."""

from datetime import UTC, datetime, timedelta

import pytest

from fakes import TASK_DEFINITION_ARN, task_record
from fargate_tasks.core.ecs import EnvVar, Task, TaskDefinitionInfo, assemble_task, task_id_from_arn
from fargate_tasks.core.ecs.assembler import first_container_override

DEFINITION = TaskDefinitionInfo(
    arn=TASK_DEFINITION_ARN,
    image="nginx:1.25",
    task_role="arn:aws:iam::123456789012:role/web-task",
    environment=(EnvVar("A", "1"), EnvVar("B", "2")),
    revision="7",
)


def test_task_id_from_arn() -> None:
    assert task_id_from_arn("arn:aws:ecs:eu-west-2:123:task/default/abc123") == "abc123"
    assert task_id_from_arn("abc123") == "abc123"


def test_assembles_all_sources() -> None:
    record = task_record(
        "abc123",
        environment=[{"name": "B", "value": "9"}, {"name": "C", "value": "3"}],
        command=["python", "-m", "worker"],
        details=[
            {"name": "networkInterfaceId", "value": "eni-1"},
            {"name": "subnetId", "value": "subnet-1"},
        ],
    )

    task = assemble_task(record, DEFINITION, first_container_override(record))

    assert task.task_id == "abc123"
    assert task.cpu == "256"
    assert task.memory == "512"
    assert task.desired_status == "RUNNING"
    assert task.last_status == "RUNNING"
    assert task.image == "nginx:1.25"
    assert task.task_role == "arn:aws:iam::123456789012:role/web-task"
    assert task.command == ("python", "-m", "worker")
    assert task.env_vars == (EnvVar("B", "9"), EnvVar("C", "3"), EnvVar("A", "1"))
    assert task.eni_id == "eni-1"
    assert task.subnet_id == "subnet-1"
    assert task.started_by == "fargate:web"
    assert task.task_group == "web"
    assert task.deployment_id == "7"


def test_missing_override_and_attachment_are_empty() -> None:
    record = task_record("abc123", started_by="ecs-svc/123")
    record["overrides"] = {"containerOverrides": []}

    task = assemble_task(record, DEFINITION, first_container_override(record))

    assert task.command == ()
    assert task.env_vars == (EnvVar("A", "1"), EnvVar("B", "2"))
    assert task.eni_id == ""
    assert task.subnet_id == ""
    assert task.task_group is None


def test_command_has_no_definition_fallback() -> None:
    record = task_record("abc123", command=[])

    task = assemble_task(record, DEFINITION, first_container_override(record))

    assert task.command == ()


def test_first_container_override_absent() -> None:
    assert first_container_override({}) is None
    assert first_container_override({"overrides": {}}) is None


@pytest.mark.parametrize(
    ("created_at", "expected"),
    [
        (datetime(2024, 5, 1, 12, 0, 0, tzinfo=UTC), timedelta(minutes=5, seconds=3)),
        (None, timedelta(0)),
    ],
)
def test_running_for_truncates_to_seconds(
    created_at: datetime | None, expected: timedelta
) -> None:
    task = Task(task_id="abc123", created_at=created_at)
    now = datetime(2024, 5, 1, 12, 5, 3, 750000, tzinfo=UTC)

    assert task.running_for(now) == expected
