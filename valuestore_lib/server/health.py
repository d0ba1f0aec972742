"""Server health utilities.

Provides a simple `get_health` function returning server status,
start time, uptime in seconds and a summary of the shared storage.
"""
from datetime import datetime, timezone
import time
from typing import Optional

from valuestore_lib import __version__
from valuestore_lib.storage import KeyValueStorage

# record process start time at import
_START_TIME = time.time()


def get_health(storage: Optional[KeyValueStorage] = None) -> dict:
    """Return a dict representing server health.

    Fields:
    - status: 'ok'
    - start_time: ISO 8601 UTC timestamp when the process started
    - uptime_seconds: integer seconds since start
    - version: package version
    - storage_keys: number of top-level keys, or None without a storage
    """
    now = time.time()
    uptime = int(now - _START_TIME)
    start_dt = datetime.fromtimestamp(_START_TIME, tz=timezone.utc)

    return {
        "status": "ok",
        "start_time": start_dt.isoformat(),
        "uptime_seconds": uptime,
        "version": __version__,
        "storage_keys": len(storage) if storage is not None else None,
    }
