"""Shared fixtures for unit tests."""

from unittest.mock import MagicMock

import pytest

from fakes import TASK_ARN_PREFIX, set_pages, task_definition_response


@pytest.fixture()
def ecs_client() -> MagicMock:
    """A stand-in for the boto3 ECS client."""
    client = MagicMock()
    client.describe_task_definition.return_value = task_definition_response()
    client.describe_tasks.return_value = {"tasks": [], "failures": []}
    client.run_task.return_value = {
        "tasks": [{"taskArn": f"{TASK_ARN_PREFIX}new-task"}],
        "failures": [],
    }
    set_pages(client, [])
    return client
