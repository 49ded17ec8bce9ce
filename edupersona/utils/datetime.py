# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""DateTime utilities for EduPersona.

Interaction timestamps arrive from callers in whatever form their storage
produced. Everything that reads a timestamp goes through ensure_utc() so
naive and aware datetimes never mix.

Scoring never reads the clock: utc_now() is only used as a default for
records built by callers and tests.
"""

from datetime import datetime, timezone

# Inclusive start hours of each bucket, in UTC
TIME_OF_DAY_BUCKETS: tuple[tuple[int, str], ...] = (
    (5, "morning"),
    (12, "afternoon"),
    (17, "evening"),
    (21, "night"),
)


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Returns:
        Timezone-aware datetime representing current UTC time.
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Ensure a datetime is timezone-aware UTC.

    Args:
        dt: A datetime object (naive or aware) or None.

    Returns:
        Timezone-aware UTC datetime or None.

    Note:
        - If dt is None, returns None
        - If dt is naive, assumes UTC and adds tzinfo
        - If dt is aware, converts to UTC
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def time_of_day(dt: datetime) -> str:
    """Classify a timestamp into a coarse time-of-day bucket.

    Args:
        dt: Timestamp to classify (naive values are treated as UTC).

    Returns:
        One of "morning", "afternoon", "evening" or "night".

    Example:
        >>> time_of_day(datetime(2025, 1, 5, 7, 30))
        'morning'
    """
    hour = ensure_utc(dt).hour
    bucket = "night"
    for start_hour, label in TIME_OF_DAY_BUCKETS:
        if hour >= start_hour:
            bucket = label
    return bucket
