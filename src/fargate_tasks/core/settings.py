"""Runtime settings for fargate-tasks."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fargate_tasks.config.paths import env_path

ENV_FILE_PATH = str(env_path())


class FargateSettings(BaseSettings):
    """Cluster and AWS configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FARGATE_",
        env_file=ENV_FILE_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    cluster: str = Field(default="fargate", description="ECS cluster name")
    region: str = Field(default="eu-west-2", description="AWS region")
    profile: str | None = Field(default=None, description="AWS profile name")


def get_settings(**overrides: str | None) -> FargateSettings:
    """Load settings, letting non-empty keyword values win over the environment."""
    values = {key: value for key, value in overrides.items() if value}
    return FargateSettings(**values)
