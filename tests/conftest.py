from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import pytest
import requests
from fastapi.testclient import TestClient

from backend.app.core.config import Settings
from backend.app.integrations.solar_api import SolarApiClient
from backend.app.main import create_app


UPSTREAM_URL = "http://upstream.test:4545"


def make_response(status_code: int, json_body: Any = None, text: str | None = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    if json_body is not None:
        response._content = json.dumps(json_body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = (text or "").encode("utf-8")
    response.encoding = "utf-8"
    return response


@dataclass
class UpstreamCall:
    method: str
    path: str
    json: Any = None
    files: dict[str, tuple[str, bytes]] = field(default_factory=dict)
    timeout: Any = None


class StubUpstream:
    """Stands in for the requests.Session of the upstream client.

    Only routes registered with ``respond``/``fail`` may be called; any other
    upstream request fails the test.
    """

    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], requests.Response | Exception] = {}
        self.calls: list[UpstreamCall] = []
        self.handles: list[Any] = []
        self.closed = False

    def respond(self, method: str, path: str, status_code: int = 200, json_body: Any = None, text: str | None = None) -> None:
        self._routes[(method, path)] = make_response(status_code, json_body=json_body, text=text)

    def fail(self, method: str, path: str, exc: Exception) -> None:
        self._routes[(method, path)] = exc

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        assert url.startswith(UPSTREAM_URL), url
        path = url[len(UPSTREAM_URL):]

        files: dict[str, tuple[str, bytes]] = {}
        for name, (filename, handle) in (kwargs.get("files") or {}).items():
            self.handles.append(handle)
            files[name] = (filename, handle.read())

        self.calls.append(
            UpstreamCall(
                method=method,
                path=path,
                json=kwargs.get("json"),
                files=files,
                timeout=kwargs.get("timeout"),
            )
        )

        outcome = self._routes.get((method, path))
        if outcome is None:
            pytest.fail(f"unexpected upstream call: {method} {url}")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def stub_upstream() -> StubUpstream:
    return StubUpstream()


@pytest.fixture
def upstream_client(stub_upstream: StubUpstream) -> SolarApiClient:
    return SolarApiClient(UPSTREAM_URL, session=stub_upstream)


@pytest.fixture
def client(upstream_client: SolarApiClient):
    app = create_app(Settings(upstream_url=UPSTREAM_URL), upstream=upstream_client)
    with TestClient(app) as test_client:
        yield test_client
