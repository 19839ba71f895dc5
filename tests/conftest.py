"""Pytest fixtures for Polytoria API client tests."""

from __future__ import annotations

import asyncio
import os
from types import TracebackType
from typing import Any

import pytest

from polytoria_api.config import Settings
from polytoria_api.schemas.polytoria_api import UserSearchResult

# Keep a developer's .env or shell from leaking into tests
os.environ.pop("POLYTORIA_PT_AUTH_COOKIE", None)


class FakeResponse:
    """Stands in for aiohttp.ClientResponse."""

    def __init__(
        self,
        status: int,
        json_body: object | None = None,
        reason: str = "OK",
        json_error: Exception | None = None,
    ) -> None:
        self.status = status
        self.reason = reason
        self._json_body = json_body
        self._json_error = json_error

    async def __aenter__(self) -> FakeResponse:
        return self

    async def __aexit__(
        self,
        exc_type: BaseException | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        return False

    async def json(self, content_type: str | None = "application/json") -> object | None:
        if self._json_error is not None:
            raise self._json_error
        return self._json_body


class FakeSession:
    """Stands in for aiohttp.ClientSession, replaying queued responses."""

    def __init__(self, responses: list[FakeResponse]) -> None:
        self._responses = list(responses)
        self.requests: list[dict[str, Any]] = []

    def request(
        self,
        method: str,
        url: str,
        params: dict | None = None,
        headers: dict | None = None,
    ) -> FakeResponse:
        self.requests.append(
            {"method": method, "url": url, "params": params, "headers": headers}
        )
        if not self._responses:
            raise AssertionError("No more fake responses queued")
        return self._responses.pop(0)


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the environment, with request logging off."""
    return Settings(_env_file=None, debug=False)


@pytest.fixture
def authed_settings() -> Settings:
    """Settings with a session cookie configured."""
    return Settings(_env_file=None, debug=False, pt_auth_cookie="test-cookie")


@pytest.fixture
def user_payload() -> dict[str, Any]:
    """A full user profile as returned by users/{id}."""
    return {
        "id": 1,
        "username": "Polytoria",
        "description": "The official account.",
        "thumbnail": {
            "avatar": "https://c0.ptacdn.com/thumbnails/avatars/1.png",
            "icon": "https://c0.ptacdn.com/thumbnails/avatars/1-icon.png",
        },
        "playing": None,
        "membershipType": "plusDeluxe",
        "isStaff": True,
        "registeredAt": "2021-01-01T00:00:00.000000Z",
        "lastSeenAt": "2024-05-01T12:30:00.000000Z",
        "netWorth": 125000,
        "placeVisits": 5400,
        "profileVisits": 980,
        "forumPosts": 42,
        "assetSales": 7,
    }


def make_search_user(user_id: int, *, is_staff: bool = False) -> dict[str, Any]:
    """Build a user search result payload."""
    return {
        "id": user_id,
        "username": f"user{user_id}",
        "description": "",
        "thumbnail": {
            "avatar": f"https://c0.ptacdn.com/thumbnails/avatars/{user_id}.png",
            "icon": f"https://c0.ptacdn.com/thumbnails/avatars/{user_id}-icon.png",
        },
        "playing": None,
        "membershipType": "free",
        "isStaff": is_staff,
        "registeredAt": "2022-03-04T05:06:07.000000Z",
        "lastSeenAt": "2024-01-02T03:04:05.000000Z",
    }


def make_search_page(start: int, size: int) -> list[UserSearchResult]:
    """Build a page of search results with consecutive IDs starting at ``start``."""
    return [UserSearchResult.model_validate(make_search_user(i)) for i in range(start, start + size)]


@pytest.fixture
def search_page():
    """Factory for pages of search results."""
    return make_search_page


@pytest.fixture
def search_user():
    """Factory for user search result payloads."""
    return make_search_user


@pytest.fixture
def fake_session(monkeypatch: pytest.MonkeyPatch):
    """Install a FakeSession on a client.

    Returns a function ``install(client, responses) -> FakeSession``.
    """

    def install(client: Any, responses: list[FakeResponse]) -> FakeSession:
        session = FakeSession(responses)

        async def _fake_get_session() -> FakeSession:
            return session

        monkeypatch.setattr(client, "_get_session", _fake_get_session)
        return session

    return install


@pytest.fixture
def sleep_calls(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Replace asyncio.sleep with a recorder so backoff does not slow tests."""
    calls: list[float] = []

    async def _fake_sleep(seconds: float) -> None:
        calls.append(seconds)

    monkeypatch.setattr(asyncio, "sleep", _fake_sleep)
    return calls


@pytest.fixture
def response():
    """Factory for fake responses."""
    return FakeResponse
