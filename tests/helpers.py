"""Shared record builders for tests."""

from typing import Any


def make_type(name: str, **fields: Any) -> dict[str, Any]:
    """Property type record with neutral factors."""
    record = {
        "name": name,
        "weight_factor": 1.0,
        "minor_value_factor": 1.0,
        "avg_value_factor": 1.0,
        "major_value_factor": 1.0,
    }
    record.update(fields)
    return record
