from datetime import datetime, timezone


def utcnow() -> datetime:
    """
    Current time as a naive UTC datetime, the form timestamps are stored in.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
