"""Tests for CLI rendering and error classification."""

from datetime import timedelta

from botocore.exceptions import ClientError, EndpointConnectionError

from fargate_tasks.cli.errors import is_aws_auth_error, is_aws_endpoint_error
from fargate_tasks.cli.render import format_duration, style_status
from fargate_tasks.core.ecs import EcsTaskError


def wrapped(cause: Exception) -> EcsTaskError:
    """Return a task error chained to a cause."""
    try:
        raise EcsTaskError("list", "Failed to list ECS tasks") from cause
    except EcsTaskError as exc:
        return exc


def test_auth_error_found_through_chain() -> None:
    cause = ClientError({"Error": {"Code": "ExpiredTokenException"}}, "ListTasks")

    assert is_aws_auth_error(wrapped(cause))
    assert not is_aws_endpoint_error(wrapped(cause))


def test_endpoint_error_found_through_chain() -> None:
    cause = EndpointConnectionError(endpoint_url="https://ecs.eu-west-2.amazonaws.com")

    assert is_aws_endpoint_error(wrapped(cause))
    assert not is_aws_auth_error(wrapped(cause))


def test_format_duration() -> None:
    assert format_duration(timedelta(seconds=42)) == "42s"
    assert format_duration(timedelta(minutes=3, seconds=4)) == "3m4s"
    assert format_duration(timedelta(hours=26, seconds=1)) == "26h0m1s"


def test_style_status() -> None:
    assert style_status("RUNNING", "RUNNING") == "[green]RUNNING[/green]"
    assert style_status("RUNNING", "STOPPED") == "[yellow]RUNNING -> STOPPED[/yellow]"
    assert style_status("STOPPED", "STOPPED") == "[red]STOPPED[/red]"
    assert style_status("", "") == "[yellow]UNKNOWN[/yellow]"
