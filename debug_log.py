"""Timestamped debug log kept next to the data directory."""

import os
import threading
from datetime import datetime, timezone

from config import DEBUG_LOG_PATH, DEBUG_LOG_MAX_ENTRIES

_lock = threading.Lock()


def write_log(message: str, path: str = DEBUG_LOG_PATH,
              max_entries: int = DEBUG_LOG_MAX_ENTRIES) -> None:
    """Append a timestamped line to the debug log and echo it.

    Only the last ``max_entries`` lines are retained.
    """
    timestamp = datetime.now(timezone.utc).isoformat()
    entry = f"{timestamp} {message}\n"

    with _lock:
        lines = read_log(path)
        lines.append(entry)
        lines = lines[-max_entries:]

        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.writelines(lines)

    print(message)


def read_log(path: str = DEBUG_LOG_PATH) -> list[str]:
    """Return the retained log lines, oldest first."""
    if not os.path.exists(path):
        return []
    with open(path, "r", encoding="utf-8") as f:
        return f.readlines()
