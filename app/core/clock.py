from datetime import datetime, timezone


def get_now() -> datetime:
    """Current UTC time; overridden in tests to pin the clock."""
    return datetime.now(timezone.utc)
