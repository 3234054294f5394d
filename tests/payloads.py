"""Builders for cloudlinux-statistics payloads used across tests."""

import json
from typing import Any

RESOURCE_KEYS = ("cpu", "ep", "vmem", "pmem", "nproc", "io", "iops")


def lve_user(
    username: str,
    usage: dict[str, float] | None = None,
    limits: dict[str, float] | None = None,
    faults: dict[str, float] | None = None,
    **fields: Any,
) -> dict[str, Any]:
    """Build one user entry in cloudlinux-statistics shape.

    Categories passed as None are omitted from the entry entirely.
    """
    user: dict[str, Any] = {"username": username, **fields}
    for name, readings in (("usage", usage), ("limits", limits), ("faults", faults)):
        if readings is not None:
            user[name] = {key: {"lve": value} for key, value in readings.items()}
    return user


def full_readings(base: float) -> dict[str, float]:
    """Distinct readings for all seven resources, starting at base."""
    return {key: base + i for i, key in enumerate(RESOURCE_KEYS)}


def build_payload(*users: dict[str, Any], **top_level: Any) -> bytes:
    """Serialize a complete payload around the given user entries."""
    document = {
        "result": "success",
        "timestamp": 1702300000.0,
        "users": list(users),
        "resellers": [],
        "mySqlGov": "enabled",
        **top_level,
    }
    return json.dumps(document).encode()
