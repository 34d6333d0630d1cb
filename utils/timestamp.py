"""Microsecond timestamps for snapshots, errors and log records."""

import time
from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return time.time_ns() // 1_000


def format_timestamp(epoch_us=None):
    """Format as ISO 8601 UTC with microseconds, e.g. 2024-01-01T00:00:00.000000Z."""
    if epoch_us is None:
        epoch_us = now_micros()
    moment = _EPOCH + timedelta(microseconds=epoch_us)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"
