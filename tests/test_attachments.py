"""Tests for attachment detail extraction."""

from fargate_tasks.core.ecs import extract_attachment_details
from fargate_tasks.core.ecs.attachments import first_attachment_details


def test_extracts_interface_and_subnet() -> None:
    details = [
        {"name": "subnetId", "value": "subnet-123"},
        {"name": "networkInterfaceId", "value": "eni-abc"},
        {"name": "macAddress", "value": "0a:1b:2c:3d:4e:5f"},
        {"name": "privateIPv4Address", "value": "10.0.0.12"},
    ]

    assert extract_attachment_details(details) == ("eni-abc", "subnet-123")


def test_missing_keys_are_empty() -> None:
    assert extract_attachment_details([{"name": "subnetId", "value": "subnet-1"}]) == (
        "",
        "subnet-1",
    )
    assert extract_attachment_details([]) == ("", "")
    assert extract_attachment_details(None) == ("", "")


def test_only_first_attachment_is_used() -> None:
    record = {
        "attachments": [
            {"details": [{"name": "networkInterfaceId", "value": "eni-first"}]},
            {"details": [{"name": "networkInterfaceId", "value": "eni-second"}]},
        ]
    }

    assert first_attachment_details(record) == [
        {"name": "networkInterfaceId", "value": "eni-first"}
    ]


def test_record_without_attachments() -> None:
    assert first_attachment_details({}) == []
    assert first_attachment_details({"attachments": []}) == []
