"""Test configuration and fixtures."""

from __future__ import annotations

import io
import json
from collections.abc import Callable
from typing import Any
from unittest.mock import Mock

import pytest
import requests

from gh_activity.client import EventsClient
from gh_activity.events import Event


def _make_response(
    status_code: int = 200, body: Any = None, *, raw: bytes | None = None
) -> requests.Response:
    """Build a real `requests.Response` without touching the network."""

    resp = requests.Response()
    resp.status_code = status_code
    content = raw if raw is not None else json.dumps(body).encode("utf-8")
    resp.raw = io.BytesIO(content)
    resp.url = "https://api.github.com/users/octocat/events"
    return resp


@pytest.fixture
def session() -> Mock:
    """Provide a mocked requests session."""
    return Mock(spec=requests.Session)


@pytest.fixture
def client(session: Mock) -> EventsClient:
    """Provide an events client backed by the mocked session."""
    return EventsClient(base_url="https://api.github.com", timeout=5.0, session=session)


@pytest.fixture
def make_event() -> Callable[..., Event]:
    """Build an Event the way the API would return it."""

    def _make(event_type: str, payload: dict[str, Any] | None = None, repo: str = "octo/repo") -> Event:
        return Event.model_validate(
            {
                "id": "1",
                "type": event_type,
                "actor": {"login": "octocat"},
                "repo": {"id": 1, "name": repo},
                "payload": payload or {},
                "public": True,
                "created_at": "2025-01-01T00:00:00Z",
            }
        )

    return _make


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GITHUB_BASE_URL", "GH_ACTIVITY_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    """Build canned HTTP responses for the mocked session."""
    return _make_response
