"""ECS task error helpers for the CLI."""

from botocore.exceptions import (
    ClientError,
    EndpointConnectionError,
    NoCredentialsError,
    ProfileNotFound,
)
from rich.markup import escape

from fargate_tasks.cli.ui import console
from fargate_tasks.core.ecs import EcsTaskError

OPERATION_MESSAGES = {
    "list": "Could not list ECS tasks",
    "describe": "Could not describe ECS tasks",
    "describe task definition": "Could not describe ECS task definition",
    "run": "Could not run ECS task",
    "stop": "Could not stop ECS task",
}


def report_task_error(exc: Exception) -> None:
    """Render task operation errors with actionable guidance.

    Args:
        exc: Raised exception from a task operation.
    """
    if is_aws_auth_error(exc):
        console.print(
            "[red]AWS authentication failed. Your credentials are missing, invalid, "
            "or expired.[/red]"
        )
        console.print(
            "[dim]If using AWS profile/SSO, run: aws sso login --profile <profile>. "
            "If using temporary keys, refresh AWS_SESSION_TOKEN and retry.[/dim]"
        )
        return

    if is_aws_endpoint_error(exc):
        console.print("[red]Could not reach AWS endpoint from this environment.[/red]")
        console.print("[dim]Check network connectivity and AWS region configuration.[/dim]")
        return

    if isinstance(exc, EcsTaskError):
        title = OPERATION_MESSAGES.get(exc.operation, "ECS task operation failed")
        console.print(f"[red]{title}: {escape(str(exc))}[/red]")
        return

    console.print(f"[red]Task operation failed: {escape(str(exc))}[/red]")


def is_aws_auth_error(exc: Exception) -> bool:
    """Return true when an exception chain indicates AWS auth issues.

    Args:
        exc: Raised exception from a task operation.

    Returns:
        True when the chain contains an auth-related error.
    """
    auth_codes = {
        "ExpiredToken",
        "ExpiredTokenException",
        # spellchecker:ignore-next-line
        "UnrecognizedClientException",
        "InvalidClientTokenId",
        "InvalidSignatureException",
        "AccessDenied",
        "AccessDeniedException",
    }
    for item in exception_chain(exc):
        if isinstance(item, (NoCredentialsError, ProfileNotFound)):
            return True
        if isinstance(item, ClientError):
            code = str(item.response.get("Error", {}).get("Code", ""))
            if code in auth_codes:
                return True
    return False


def is_aws_endpoint_error(exc: Exception) -> bool:
    """Return true when an exception chain indicates endpoint/network errors.

    Args:
        exc: Raised exception from a task operation.

    Returns:
        True when the chain contains endpoint connection errors.
    """
    return any(isinstance(item, EndpointConnectionError) for item in exception_chain(exc))


def exception_chain(exc: BaseException) -> list[BaseException]:
    """Return exceptions in cause/context chain.

    Args:
        exc: Root exception.

    Returns:
        Ordered exception chain from root to cause/context.
    """
    chain: list[BaseException] = []
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        chain.append(current)
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return chain
