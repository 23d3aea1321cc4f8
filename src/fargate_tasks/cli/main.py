"""CLI entrypoint for fargate-tasks."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import click
from botocore.exceptions import BotoCoreError

from fargate_tasks.cli.errors import report_task_error
from fargate_tasks.cli.render import (
    print_task_detail,
    print_task_groups_table,
    print_tasks_table,
)
from fargate_tasks.cli.ui import confirm, console
from fargate_tasks.core.ecs import EcsTaskError, EnvVar, RunTaskInput, TaskManager, create_session
from fargate_tasks.core.settings import FargateSettings, get_settings

logger = logging.getLogger(__name__)


@contextmanager
def handle_task_errors() -> Iterator[None]:
    """Report task operation failures and exit with status 1."""
    try:
        yield
    except (EcsTaskError, BotoCoreError) as exc:
        logger.debug("Task operation failed", exc_info=exc)
        report_task_error(exc)
        sys.exit(1)


def task_manager(ctx: click.Context) -> TaskManager:
    """Return the task manager for the invocation, creating it on first use.

    Args:
        ctx: Click context for the command invocation.

    Returns:
        A task manager bound to the configured cluster.
    """
    if "manager" not in ctx.obj:
        settings: FargateSettings = ctx.obj["settings"]
        session = create_session(settings)
        ctx.obj["manager"] = TaskManager.from_session(session, settings.cluster)
    return ctx.obj["manager"]


def parse_env_vars(values: tuple[str, ...]) -> list[EnvVar]:
    """Parse ``KEY=VALUE`` options.

    Args:
        values: Raw option values.

    Returns:
        Parsed environment variables.
    """
    try:
        return [EnvVar.parse(value) for value in values]
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--env") from exc


@click.group()
@click.option("--cluster", help="ECS cluster name.")
@click.option("--region", help="AWS region.")
@click.option("--profile", help="AWS profile name.")
@click.option("-v", "--verbose", is_flag=True, help="Log AWS calls.")
@click.pass_context
def cli(
    ctx: click.Context,
    cluster: str | None,
    region: str | None,
    profile: str | None,
    verbose: bool,
) -> None:
    """Inspect, launch and stop ECS Fargate tasks.

    Args:
        ctx: Click context for the command invocation.
        cluster: Cluster name overriding settings.
        region: AWS region overriding settings.
        profile: AWS profile overriding settings.
        verbose: Whether to log at debug level.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    if not verbose:
        logging.getLogger("botocore").setLevel(logging.WARNING)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = get_settings(cluster=cluster, region=region, profile=profile)


@cli.command("ps")
@click.option("--service", "service_name", help="Only list tasks of this service.")
@click.option("--group", "group_name", help="Only list tasks of this task group.")
@click.pass_context
def list_tasks(ctx: click.Context, service_name: str | None, group_name: str | None) -> None:
    """List running tasks."""
    if service_name and group_name:
        raise click.UsageError("Use either --service or --group, not both.")

    with handle_task_errors():
        manager = task_manager(ctx)
        if service_name:
            tasks = manager.list_tasks_for_service(service_name)
            title = f"Tasks of service {service_name}"
        elif group_name:
            tasks = manager.list_tasks_for_group(group_name)
            title = f"Tasks of group {group_name}"
        else:
            tasks = manager.list_tasks()
            title = f"Tasks in {manager.cluster_name}"

    print_tasks_table(tasks, title)


@cli.command("info")
@click.argument("task_ids", nargs=-1, required=True)
@click.pass_context
def task_info(ctx: click.Context, task_ids: tuple[str, ...]) -> None:
    """Show details of one or more tasks."""
    with handle_task_errors():
        manager = task_manager(ctx)
        tasks = manager.describe_tasks(list(task_ids))

    if not tasks:
        console.print("[yellow]No matching tasks found.[/yellow]")
        return
    for task in tasks:
        print_task_detail(task)


@cli.command("groups")
@click.pass_context
def task_groups(ctx: click.Context) -> None:
    """List task groups and their running instance counts."""
    with handle_task_errors():
        manager = task_manager(ctx)
        groups = manager.list_task_groups()

    print_task_groups_table(groups)


@cli.command("run")
@click.argument("task_name")
@click.option("--task-definition", required=True, help="Task definition ARN or family:revision.")
@click.option("--subnet", "subnet_ids", multiple=True, required=True, help="Subnet ID.")
@click.option("--security-group", "security_group_ids", multiple=True, help="Security group ID.")
@click.option("--count", default=1, show_default=True, type=click.IntRange(min=1, max=10))
@click.option("--command", "command", help="Command override, split on whitespace.")
@click.option("--env", "env_values", multiple=True, help="Environment override KEY=VALUE.")
@click.pass_context
def run_task(
    ctx: click.Context,
    task_name: str,
    task_definition: str,
    subnet_ids: tuple[str, ...],
    security_group_ids: tuple[str, ...],
    count: int,
    command: str | None,
    env_values: tuple[str, ...],
) -> None:
    """Launch tasks into the task group TASK_NAME."""
    env_vars = parse_env_vars(env_values)
    with handle_task_errors():
        manager = task_manager(ctx)
        run_input = RunTaskInput(
            cluster_name=manager.cluster_name,
            task_definition_arn=task_definition,
            task_name=task_name,
            count=count,
            command=command.split() if command else [],
            env_vars=env_vars,
            security_group_ids=list(security_group_ids),
            subnet_ids=list(subnet_ids),
        )
        task_arns = manager.run_task(run_input)

    console.print(f"[green]Started {len(task_arns)} task(s) in group {task_name}.[/green]")
    for task_arn in task_arns:
        console.print(f"  {task_arn}")


@cli.command("stop")
@click.argument("task_ids", nargs=-1)
@click.option("--group", "group_name", help="Stop every task of this task group.")
@click.option("-y", "--yes", is_flag=True, help="Do not ask for confirmation.")
@click.pass_context
def stop_tasks(
    ctx: click.Context,
    task_ids: tuple[str, ...],
    group_name: str | None,
    yes: bool,
) -> None:
    """Stop tasks by ID, or every task of a group."""
    if bool(task_ids) == bool(group_name):
        raise click.UsageError("Pass either task IDs or --group.")

    with handle_task_errors():
        manager = task_manager(ctx)
        if group_name:
            targets = [task.task_id for task in manager.list_tasks_for_group(group_name)]
        else:
            targets = list(task_ids)

        if not targets:
            console.print("[yellow]No tasks to stop.[/yellow]")
            return
        if not yes and not confirm(f"Stop {len(targets)} task(s) in {manager.cluster_name}?"):
            console.print("Cancelled.")
            return

        manager.stop_tasks(targets)

    console.print(f"[green]Stopped {len(targets)} task(s).[/green]")


def main() -> None:
    """Run the CLI."""
    cli()
