"""Timestamp parsing for API payloads."""

from datetime import datetime


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO-8601 timestamp, returning None when absent."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"Expected ISO timestamp string, got {type(value).__name__}")
    return datetime.fromisoformat(value)
