"""Thread-safe conversion of timestamps to local time."""

from __future__ import annotations

import threading
import time

_localtime_lock = threading.Lock()


def localtime(timestamp: float | None = None) -> time.struct_time:
    """Convert ``timestamp`` (seconds since the epoch, or now) to local time.

    Conversions are serialised so that concurrent callers never see each
    other's results. Out-of-range timestamps raise the error the platform
    reports (OverflowError, OSError or ValueError).
    """
    with _localtime_lock:
        return time.localtime(timestamp)