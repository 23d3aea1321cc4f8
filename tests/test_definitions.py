"""Tests for task definition lookups."""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from fakes import TASK_DEFINITION_ARN
from fargate_tasks.core.ecs import EcsTaskError, EnvVar, TaskDefinitionCache
from fargate_tasks.core.ecs.definitions import (
    task_definition_from_response,
    task_definition_revision,
)


def test_reads_first_container(ecs_client: MagicMock) -> None:
    definition = TaskDefinitionCache(ecs_client).get(TASK_DEFINITION_ARN)

    assert definition.image == "nginx:1.25"
    assert definition.task_role == "arn:aws:iam::123456789012:role/web-task"
    assert definition.environment == (EnvVar("A", "1"), EnvVar("B", "2"))
    assert definition.revision == "7"


def test_describes_each_arn_once(ecs_client: MagicMock) -> None:
    cache = TaskDefinitionCache(ecs_client)

    cache.get(TASK_DEFINITION_ARN)
    cache.get(TASK_DEFINITION_ARN)

    ecs_client.describe_task_definition.assert_called_once_with(
        taskDefinition=TASK_DEFINITION_ARN
    )


def test_failure_raises_task_error(ecs_client: MagicMock) -> None:
    error = ClientError(
        {"Error": {"Code": "ClientException", "Message": "Unable to describe task definition."}},
        "DescribeTaskDefinition",
    )
    ecs_client.describe_task_definition.side_effect = error

    with pytest.raises(EcsTaskError) as exc_info:
        TaskDefinitionCache(ecs_client).get(TASK_DEFINITION_ARN)

    assert exc_info.value.operation == "describe task definition"
    assert exc_info.value.__cause__ is error


def test_definition_without_containers() -> None:
    definition = task_definition_from_response("web:3", {})

    assert definition.image == ""
    assert definition.environment == ()
    assert definition.revision == "3"


@pytest.mark.parametrize(
    ("reference", "expected"),
    [
        (TASK_DEFINITION_ARN, "7"),
        ("web:12", "12"),
        ("web", ""),
    ],
)
def test_task_definition_revision(reference: str, expected: str) -> None:
    assert task_definition_revision(reference) == expected
