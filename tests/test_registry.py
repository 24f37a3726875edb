"""Unit tests for the pub registry client."""

from __future__ import annotations

import json
from typing import Any, Iterable, List

import pytest
import requests

from constants import USER_AGENT
from registry import (
    build_session,
    extract_latest_version,
    fetch_latest_version,
    make_lookup,
    package_url,
)


class _DummyResponse:  # pylint: disable=too-few-public-methods
    """Minimal stub mimicking requests.Response for tests."""

    def __init__(self, *, status_code: int = 200, text: str) -> None:
        self.status_code = status_code
        self.text = text

    def json(self) -> Any:
        return json.loads(self.text)


class _DummySession(requests.Session):
    """Small fixture emulating the subset of Session behaviour we need."""

    def __init__(
        self, responses: Iterable[_DummyResponse], *, raise_exc: Exception | None = None
    ) -> None:
        super().__init__()
        self._responses = iter(responses)
        self._exc = raise_exc
        self.get_calls: List[str] = []

    def get(  # type: ignore[override]  # pragma: no cover - signature mirrors requests
        self, url: str, **kwargs: Any
    ) -> _DummyResponse:
        """Return the next fake response while recording the URL."""
        del kwargs
        self.get_calls.append(url)
        if self._exc is not None:
            raise self._exc
        return next(self._responses)


def test_package_url_uses_metadata_endpoint() -> None:
    assert package_url("http") == "https://pub.dev/api/packages/http"
    assert package_url("http", "https://mirror.test/") == "https://mirror.test/api/packages/http"


def test_build_session_sets_headers() -> None:
    session = build_session()
    try:
        assert session.headers["User-Agent"] == USER_AGENT
        assert session.headers["Accept"] == "application/json"
    finally:
        session.close()


def test_fetch_latest_version_reads_latest_field() -> None:
    """The latest.version field is returned as-is."""
    body = json.dumps({"name": "http", "latest": {"version": "1.2.0"}, "versions": []})
    session = _DummySession([_DummyResponse(text=body)])

    assert fetch_latest_version(session, "http") == "1.2.0"
    assert session.get_calls == ["https://pub.dev/api/packages/http"]


@pytest.mark.parametrize(
    "body",
    [
        json.dumps({"latest": {"version": None}}),
        json.dumps({"latest": {"version": "null"}}),
        json.dumps({"latest": {}}),
        json.dumps({"error": {"code": "NotFound", "message": "Package not found."}}),
        "<html>maintenance</html>",
    ],
)
def test_fetch_latest_version_returns_none_for_unusable_bodies(body: str) -> None:
    """Missing, null and non-JSON answers all mean 'unknown'."""
    session = _DummySession([_DummyResponse(status_code=404, text=body)])

    assert fetch_latest_version(session, "nope") is None


def test_fetch_latest_version_swallows_request_errors() -> None:
    """Network failures never escape the client."""
    session = _DummySession([], raise_exc=requests.exceptions.ConnectionError("offline"))

    assert fetch_latest_version(session, "http") is None


def test_extract_latest_version_rejects_non_mappings() -> None:
    assert extract_latest_version([]) is None
    assert extract_latest_version({"latest": "1.0.0"}) is None
    assert extract_latest_version({"latest": {"version": " 2.0.0 "}}) == "2.0.0"


def test_make_lookup_binds_session_and_base_url() -> None:
    body = json.dumps({"latest": {"version": "0.5.0"}})
    session = _DummySession([_DummyResponse(text=body)])

    lookup = make_lookup(session, "https://mirror.test")

    assert lookup("path") == "0.5.0"
    assert session.get_calls == ["https://mirror.test/api/packages/path"]
