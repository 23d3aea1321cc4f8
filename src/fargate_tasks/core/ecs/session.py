"""AWS session helpers."""

import boto3

from fargate_tasks.core.settings import FargateSettings


def create_session(settings: FargateSettings) -> boto3.session.Session:
    """Create a boto3 session."""
    if settings.profile:
        return boto3.session.Session(
            profile_name=settings.profile,
            region_name=settings.region,
        )

    return boto3.session.Session(region_name=settings.region)
