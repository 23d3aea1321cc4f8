"""Rich rendering of tasks and task groups."""

from datetime import datetime, timedelta

from rich.table import Table

from fargate_tasks.cli.ui import console
from fargate_tasks.core.ecs import Task, TaskGroup


def print_tasks_table(tasks: list[Task], title: str, now: datetime | None = None) -> None:
    """Print a table of tasks.

    Args:
        tasks: Tasks to show.
        title: Table title.
        now: Reference time for the running duration column.
    """
    if not tasks:
        console.print("[yellow]No tasks found.[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("ID", style="white", no_wrap=True)
    table.add_column("Group", style="bright_white")
    table.add_column("Image", style="bright_white")
    table.add_column("Status", style="white", no_wrap=True)
    table.add_column("Running", style="white", no_wrap=True)
    table.add_column("CPU", style="white", no_wrap=True)
    table.add_column("Memory", style="white", no_wrap=True)

    for task in tasks:
        table.add_row(
            task.task_id,
            task.task_group or "-",
            task.image or "-",
            style_status(task.last_status, task.desired_status),
            format_duration(task.running_for(now)),
            task.cpu or "-",
            task.memory or "-",
        )

    console.print(table)


def print_task_detail(task: Task, now: datetime | None = None) -> None:
    """Print every known field of a task."""
    table = Table(title=f"Task {task.task_id}", show_header=False)
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Value", style="bright_white")

    table.add_row("Status", style_status(task.last_status, task.desired_status))
    table.add_row("Group", task.task_group or "-")
    table.add_row("Started by", task.started_by or "-")
    table.add_row("Revision", task.deployment_id or "-")
    table.add_row("Image", task.image or "-")
    table.add_row("Task role", task.task_role or "-")
    table.add_row("Command", " ".join(task.command) or "-")
    table.add_row("CPU", task.cpu or "-")
    table.add_row("Memory", task.memory or "-")
    table.add_row("Running for", format_duration(task.running_for(now)))
    table.add_row("Network interface", task.eni_id or "-")
    table.add_row("Subnet", task.subnet_id or "-")
    table.add_row(
        "Environment",
        "\n".join(f"{env_var.key}={env_var.value}" for env_var in task.env_vars) or "-",
    )

    console.print(table)


def print_task_groups_table(task_groups: list[TaskGroup]) -> None:
    """Print a table of task groups and instance counts."""
    if not task_groups:
        console.print("[yellow]No task groups found.[/yellow]")
        return

    table = Table(title="Task groups", show_header=True, header_style="bold cyan")
    table.add_column("Name", style="white", no_wrap=True)
    table.add_column("Instances", style="bright_white", justify="right")
    for task_group in task_groups:
        table.add_row(task_group.name, str(task_group.instances))

    console.print(table)


def style_status(last_status: str, desired_status: str) -> str:
    """Return colourised status text for terminal output.

    A task moving towards a different desired status is shown as a transition.
    """
    status = last_status or "UNKNOWN"
    if desired_status and desired_status != last_status:
        status = f"{status} -> {desired_status}"
    if last_status == "RUNNING" and desired_status in ("", "RUNNING"):
        return f"[green]{status}[/green]"
    if last_status == "STOPPED":
        return f"[red]{status}[/red]"
    return f"[yellow]{status}[/yellow]"


def format_duration(duration: timedelta) -> str:
    """Format a duration as ``1h2m3s``."""
    total = int(duration.total_seconds())
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    if hours:
        return f"{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{minutes}m{seconds}s"
    return f"{seconds}s"
