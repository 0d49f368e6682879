import pytest
import requests

from data.cache import ExpiringCache


class FakeResponse:
    def __init__(self, payload, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def json(self):
        return self._payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class FakeSession:
    """Stands in for requests.Session; routes map a URL suffix to a payload."""

    def __init__(self, routes: dict) -> None:
        self.headers: dict = {}
        self.routes = routes
        self.calls: list[tuple] = []

    def request(self, method, url, timeout=None, params=None, json=None):
        self.calls.append((method, url, params, json))
        for suffix, payload in self.routes.items():
            if url.endswith(suffix):
                if isinstance(payload, FakeResponse):
                    return payload
                return FakeResponse(payload)
        return FakeResponse({"error": "not found"}, status_code=404)


@pytest.fixture
def api_cache(tmp_path) -> ExpiringCache:
    return ExpiringCache(cache_dir=str(tmp_path / "cache"))


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def fake_response():
    return FakeResponse
