import time

from valuestore_lib import __version__
from valuestore_lib.server.health import get_health
from valuestore_lib.storage import KeyValueStorage


def test_get_health_contains_fields():
    h = get_health()
    assert isinstance(h, dict)
    assert h.get("status") == "ok"
    assert "start_time" in h
    assert "uptime_seconds" in h
    assert isinstance(h["uptime_seconds"], int)
    assert h["version"] == __version__
    assert h["storage_keys"] is None


def test_get_health_counts_storage_keys():
    h = get_health(KeyValueStorage({'a': 1, 'b': {'c': 2}}))
    assert h["storage_keys"] == 2


def test_uptime_increases():
    h1 = get_health()
    time.sleep(1)
    h2 = get_health()
    assert h2["uptime_seconds"] >= h1["uptime_seconds"] + 1
