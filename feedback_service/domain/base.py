from datetime import UTC, datetime


def utc_now() -> datetime:
    """Naive UTC timestamp, matching what the SQL columns hand back"""
    return datetime.now(UTC).replace(tzinfo=None)
