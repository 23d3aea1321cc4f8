"""Effective container environment for a task."""

from collections.abc import Iterable
from typing import Any

from fargate_tasks.core.ecs.models import EnvVar


def merge_environment(
    declared: Iterable[EnvVar],
    overrides: Iterable[EnvVar],
) -> tuple[EnvVar, ...]:
    """Combine declared and override variables, overrides winning by name.

    Overrides come first in their own order, followed by every declared
    variable whose name is not overridden. Names are compared exactly.
    """
    effective = list(overrides)
    overridden = {env_var.key for env_var in effective}
    effective.extend(env_var for env_var in declared if env_var.key not in overridden)
    return tuple(effective)


def env_vars_from_pairs(pairs: Iterable[dict[str, Any]] | None) -> tuple[EnvVar, ...]:
    """Convert ECS ``{"name": ..., "value": ...}`` pairs into env vars."""
    return tuple(
        EnvVar(key=str(pair.get("name", "")), value=str(pair.get("value", "")))
        for pair in pairs or []
    )


def env_vars_to_pairs(env_vars: Iterable[EnvVar]) -> list[dict[str, str]]:
    """Convert env vars into ECS key/value pairs."""
    return [{"name": env_var.key, "value": env_var.value} for env_var in env_vars]
