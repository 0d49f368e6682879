"""Base API client with token auth, 429 back-off and expiring cache."""

import time

import requests

from config import (
    SEARCH_API_BASE, TOKEN_HEADER, TOKEN_PATH, REQUEST_TIMEOUT, USER_AGENT,
    MAX_RETRIES, RETRY_BACKOFF,
    LANGUAGE, AGE_MIN, AGE_MAX, GROUP_ID, SUBGROUP_ID,
)
from data.auth import resolve_token, save_token
from data.cache import ExpiringCache
from debug_log import write_log


class ApiBase:
    """Base class for all Wyscout search API clients."""

    def __init__(self, token: str | None = None, cache: ExpiringCache | None = None,
                 force_refresh: bool = False, session: requests.Session | None = None,
                 token_path: str | None = None):
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})
        self.cache = cache or ExpiringCache()
        self.force_refresh = force_refresh
        self.token_path = token_path or TOKEN_PATH
        self.token = resolve_token(token, path=self.token_path)
        if self.token:
            self.session.headers[TOKEN_HEADER] = self.token

    def set_token(self, token: str) -> None:
        """Use a new token for subsequent requests and persist it."""
        self.token = token
        self.session.headers[TOKEN_HEADER] = token
        save_token(token, path=self.token_path)

    def base_params(self) -> dict:
        """Query parameters shared by the rankings endpoints."""
        return {
            "app_name": "rankings",
            "language": LANGUAGE,
            "age_min": AGE_MIN,
            "age_max": AGE_MAX,
            "round": "null",
            "es5": "true",
            "token": self.token,
            "groupId": GROUP_ID,
            "subgroupId": SUBGROUP_ID,
        }

    def _url(self, path: str) -> str:
        return f"{SEARCH_API_BASE}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, **kwargs):
        """Send a request, backing off on 429. Returns the decoded JSON body."""
        url = self._url(path)
        for attempt in range(MAX_RETRIES):
            resp = self.session.request(method, url, timeout=REQUEST_TIMEOUT, **kwargs)
            if resp.status_code == 429:
                if attempt == MAX_RETRIES - 1:
                    break
                wait = RETRY_BACKOFF * (2 ** attempt)
                write_log(f"  Rate limited (429) on {path}, waiting {wait:.0f}s before retry...")
                time.sleep(wait)
                continue
            resp.raise_for_status()
            return resp.json()

        raise RuntimeError(f"Still rate limited after {MAX_RETRIES} attempts: {path}")

    def get_json(self, path: str, params: dict | None = None):
        return self._request("GET", path, params=params)

    def post_json(self, path: str, payload):
        return self._request("POST", path, json=payload)

    def cached(self, key: str, loader):
        """Return the cached value for key, or call loader() and cache a truthy result.

        With force_refresh the existing entry is dropped before loading.
        """
        if self.force_refresh:
            self.cache.delete(key)
        else:
            value = self.cache.get(key)
            if value:
                return value

        value = loader()
        if value:
            self.cache.set(key, value)
        return value
