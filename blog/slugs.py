import re
import threading
import time

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")

_clock_lock = threading.Lock()
_last_timestamp_ms = 0


def slugify_title(title):
    """Lower-case ``title`` and collapse every non-alphanumeric run into one hyphen."""
    return _NON_ALPHANUMERIC.sub("-", title.lower()).strip("-")


def _next_timestamp_ms():
    # Strictly increasing within the process, so two slugs minted in the
    # same millisecond still differ.
    global _last_timestamp_ms
    with _clock_lock:
        now_ms = time.time_ns() // 1_000_000
        if now_ms <= _last_timestamp_ms:
            now_ms = _last_timestamp_ms + 1
        _last_timestamp_ms = now_ms
        return now_ms


def mint_slug(title, timestamp_ms=None):
    """
    Build a unique slug for a blog title.

    ``"Hello, World! 2024"`` becomes ``"hello-world-2024-<epoch millis>"``.
    """
    if timestamp_ms is None:
        timestamp_ms = _next_timestamp_ms()
    return f"{slugify_title(title)}-{timestamp_ms}"
