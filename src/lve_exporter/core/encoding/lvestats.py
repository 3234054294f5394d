"""Decoder for `cloudlinux-statistics --json` output."""

import json
from typing import Any

from lve_exporter.core.errors import DecodeFailure
from lve_exporter.core.models import (
    MeasurementSet,
    PrincipalRecord,
    ResourceReading,
    Snapshot,
)

_RESOURCE_KEYS = ("cpu", "ep", "vmem", "pmem", "nproc", "io", "iops")


def _number(value: Any) -> float:
    # bool is an int subclass but never a valid reading
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    try:
        return float(value)
    except OverflowError:
        # integer too large for a float
        return 0.0


def _string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _object(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _decode_reading(obj: dict[str, Any]) -> ResourceReading:
    return ResourceReading(lve=_number(obj.get("lve")))


def _decode_measurements(obj: dict[str, Any]) -> MeasurementSet:
    readings = {key: _decode_reading(_object(obj.get(key))) for key in _RESOURCE_KEYS}
    return MeasurementSet(**readings)


def _decode_user(obj: dict[str, Any]) -> PrincipalRecord:
    return PrincipalRecord(
        id=_number(obj.get("id")),
        username=_string(obj.get("username")),
        domain=_string(obj.get("domain")),
        reseller=_string(obj.get("reseller")),
        usage=_decode_measurements(_object(obj.get("usage"))),
        limits=_decode_measurements(_object(obj.get("limits"))),
        faults=_decode_measurements(_object(obj.get("faults"))),
    )


def decode_snapshot(raw: bytes | str) -> Snapshot:
    """Decode raw utility output into a Snapshot.

    Missing or wrongly typed fields fall back to zero values and empty
    strings, as do integers too large to convert to a float. Entries of
    "users" that are not objects are skipped. Empty or whitespace-only
    input yields an empty Snapshot.

    Args:
        raw: Captured standard output of the statistics utility.

    Returns:
        Snapshot with one PrincipalRecord per user, in source order.

    Raises:
        DecodeFailure: If the input is not JSON, exceeds the parser's
            integer or nesting limits, or its top-level value is not an
            object.
    """
    size = len(raw)
    if not raw.strip():
        return Snapshot()

    try:
        document = json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise DecodeFailure(f"malformed statistics output: {e}", size) from e

    if not isinstance(document, dict):
        raise DecodeFailure(
            f"expected a JSON object, got {type(document).__name__}", size
        )

    users = document.get("users")
    resellers = document.get("resellers")
    return Snapshot(
        result=_string(document.get("result")),
        timestamp=_number(document.get("timestamp")),
        users=tuple(
            _decode_user(user)
            for user in (users if isinstance(users, list) else [])
            if isinstance(user, dict)
        ),
        resellers=tuple(resellers) if isinstance(resellers, list) else (),
        mysql_gov=_string(document.get("mySqlGov")),
    )
