"""Timezone-aware datetime helpers."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(UTC)
