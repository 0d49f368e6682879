"""JSON key-value cache with per-entry expiry."""

import glob
import hashlib
import json
import os
import re
import time

from config import RAW_DIR, CACHE_PREFIX, CACHE_EXPIRY_HOURS


class ExpiringCache:
    """File-backed cache where every entry carries its own expiry timestamp.

    Entries are stored as ``{"value": ..., "expiry": <epoch ms>}``. Stale or
    unreadable entries are removed on read.
    """

    def __init__(self, cache_dir: str = RAW_DIR, prefix: str = CACHE_PREFIX,
                 expiry_hours: float = CACHE_EXPIRY_HOURS, clock=time.time):
        self.cache_dir = cache_dir
        self.prefix = prefix
        self.expiry_hours = expiry_hours
        self._clock = clock
        os.makedirs(cache_dir, exist_ok=True)

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def _path(self, key: str) -> str:
        """Generate a deterministic file path for a cache key."""
        key_hash = hashlib.md5(key.encode()).hexdigest()[:12]
        safe_name = re.sub(r"[^A-Za-z0-9_.-]", "_", key)[:80]
        return os.path.join(self.cache_dir, f"{self.prefix}{safe_name}_{key_hash}.json")

    def get(self, key: str):
        """Return the cached value, or None if missing, corrupt or expired."""
        path = self._path(key)
        if not os.path.exists(path):
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                item = json.load(f)
            expiry = item["expiry"]
            value = item["value"]
        except (OSError, ValueError, KeyError, TypeError):
            self._remove(path)
            return None

        if self._now_ms() > expiry:
            self._remove(path)
            return None
        return value

    def set(self, key: str, value, expiry_hours: float | None = None) -> None:
        """Store a JSON-serializable value with an expiry of now + hours."""
        hours = self.expiry_hours if expiry_hours is None else expiry_hours
        item = {
            "value": value,
            "expiry": self._now_ms() + int(hours * 60 * 60 * 1000),
        }
        path = self._path(key)
        tmp_path = path + ".tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(item, f)
        os.replace(tmp_path, path)

    def delete(self, key: str) -> None:
        self._remove(self._path(key))

    def clear(self) -> int:
        """Remove every entry written with this cache's prefix."""
        paths = glob.glob(os.path.join(glob.escape(self.cache_dir), f"{self.prefix}*.json"))
        for path in paths:
            self._remove(path)
        return len(paths)

    @staticmethod
    def _remove(path: str) -> None:
        if os.path.exists(path):
            os.remove(path)
