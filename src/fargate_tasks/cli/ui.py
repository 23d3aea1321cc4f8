"""Shared Rich console for the CLI."""

import questionary
from rich.console import Console

console = Console()

QUESTIONARY_STYLE = questionary.Style(
    [
        ("qmark", "fg:#5f819d"),
        ("question", "fg:#e0e0e0 bold"),
        ("answer", "fg:#FF9D00 bold"),
        ("instruction", "fg:#e0e0e0"),
        ("text", "fg:#e0e0e0"),
    ]
)


def confirm(message: str) -> bool:
    """Ask a yes/no question, treating an aborted prompt as no.

    Args:
        message: Question to show.

    Returns:
        True when the user confirmed.
    """
    answer = questionary.confirm(message, default=False, style=QUESTIONARY_STYLE).ask()
    return bool(answer)
