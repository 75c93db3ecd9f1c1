import time


def now_epoch() -> int:
    """Current time as whole Unix epoch seconds."""
    return int(time.time())


def next_modified_at(previous: int | None) -> int:
    """Timestamp for an update that is strictly after ``previous``."""
    now = now_epoch()
    if previous is None:
        return now
    return max(now, previous + 1)
