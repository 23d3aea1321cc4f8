"""fargate-tasks core modules."""

from fargate_tasks.core.settings import FargateSettings, get_settings

__all__ = [
    "FargateSettings",
    "get_settings",
]
