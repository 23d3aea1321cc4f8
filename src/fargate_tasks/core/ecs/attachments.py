"""Network details reported in ECS task attachments."""

from typing import Any

DETAIL_NETWORK_INTERFACE_ID = "networkInterfaceId"
DETAIL_SUBNET_ID = "subnetId"


def extract_attachment_details(details: list[dict[str, Any]] | None) -> tuple[str, str]:
    """Return the network interface and subnet IDs from attachment details.

    Missing entries come back as empty strings.
    """
    values = {str(detail.get("name")): str(detail.get("value", "")) for detail in details or []}
    return values.get(DETAIL_NETWORK_INTERFACE_ID, ""), values.get(DETAIL_SUBNET_ID, "")


def first_attachment_details(record: dict[str, Any]) -> list[dict[str, Any]]:
    """Return the detail list of a task's first attachment.

    Fargate tasks carry a single ENI attachment, so later entries are ignored.
    """
    attachments = record.get("attachments") or []
    if not attachments:
        return []
    return list(attachments[0].get("details") or [])
