"""Access token persistence and lookup."""

import json
import os
import time

from config import TOKEN_PATH, TOKEN_ENV_VAR, CACHE_EXPIRY_HOURS


def save_token(token: str, path: str = TOKEN_PATH, clock=time.time) -> None:
    """Persist the token with the standard cache expiry."""
    item = {
        "token": token,
        "expiry": int(clock() * 1000) + CACHE_EXPIRY_HOURS * 60 * 60 * 1000,
    }
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(item, f)


def load_token(path: str = TOKEN_PATH, clock=time.time) -> str | None:
    """Return the stored token, or None if absent, unreadable or expired."""
    if not os.path.exists(path):
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            item = json.load(f)
        token = item["token"]
        expiry = item["expiry"]
    except (OSError, ValueError, KeyError, TypeError):
        clear_token(path)
        return None

    if int(clock() * 1000) > expiry:
        clear_token(path)
        return None
    return token


def clear_token(path: str = TOKEN_PATH) -> None:
    if os.path.exists(path):
        os.remove(path)


def resolve_token(explicit: str | None = None, path: str = TOKEN_PATH) -> str | None:
    """Pick the token to use: explicit argument, then env var, then stored token."""
    if explicit:
        return explicit
    env_token = os.environ.get(TOKEN_ENV_VAR)
    if env_token:
        return env_token
    return load_token(path)
