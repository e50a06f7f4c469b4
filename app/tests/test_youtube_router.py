"""End-to-end tests for ``GET /api/youtube`` against a mocked Data API."""

from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app


def _make_client(handler, *, api_key: str | None = "dummy-key", locale: str = "en") -> TestClient:
    settings = Settings(youtube_api_key=api_key, locale=locale, _env_file=None)
    app = create_app(settings, transport=httpx.MockTransport(handler))
    return TestClient(app)


def _no_requests(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"unexpected upstream request: {request.url}")


def _happy_path(request: httpx.Request) -> httpx.Response:
    params = request.url.params
    if params.get("forHandle") == "test":
        return httpx.Response(200, json={"items": [{"id": "UCabc1234567"}]})
    if params.get("part") == "statistics":
        assert params["id"] == "UCabc1234567"
        return httpx.Response(200, json={"items": [{"statistics": {"subscriberCount": "42"}}]})
    raise AssertionError(f"unexpected upstream request: {request.url}")


def test_resolves_handle_and_returns_subscriber_count():
    client = _make_client(_happy_path)

    response = client.get("/api/youtube", params={"channel": "@test"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json; charset=utf-8"
    assert response.headers["cache-control"] == "public, s-maxage=21600, stale-while-revalidate=60"
    body = response.json()
    assert body["ok"] is True
    assert body["channel"] == "@test"
    assert body["channelId"] == "UCabc1234567"
    assert body["subscriberCount"] == 42
    assert body["fetchedAt"].endswith("Z")


def test_refresh_controls_cache_header():
    client = _make_client(_happy_path)

    response = client.get("/api/youtube", params={"channel": "@test", "refresh": "999999"})

    assert response.headers["cache-control"] == "public, s-maxage=86400, stale-while-revalidate=60"


@pytest.mark.parametrize("params", [{}, {"channel": ""}, {"channel": "   "}])
def test_missing_channel_is_bad_request(params):
    client = _make_client(_no_requests)

    response = client.get("/api/youtube", params=params)

    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "Missing ?channel="}


@pytest.mark.parametrize("params", [{}, {"channel": "@test", "refresh": "3600"}])
def test_missing_api_key_is_server_error(params):
    client = _make_client(_no_requests, api_key=None)

    response = client.get("/api/youtube", params=params)

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "Missing YOUTUBE_API_KEY on server."}
    assert response.headers["cache-control"] == "public, s-maxage=21600, stale-while-revalidate=60"


def test_unresolved_channel_is_not_found_with_computed_cache():
    client = _make_client(lambda request: httpx.Response(200, json={"items": []}))

    response = client.get("/api/youtube", params={"channel": "nobody", "refresh": "3600"})

    assert response.status_code == 404
    assert response.json()["ok"] is False
    assert response.headers["cache-control"] == "public, s-maxage=3600, stale-while-revalidate=60"


def test_not_found_message_is_localised():
    client = _make_client(lambda request: httpx.Response(200, json={"items": []}), locale="ko")

    response = client.get("/api/youtube", params={"channel": "nobody"})

    assert response.status_code == 404
    assert response.json()["error"].startswith("채널을 찾을 수 없습니다")


def test_non_json_upstream_bodies_end_in_not_found():
    client = _make_client(lambda request: httpx.Response(200, text="<html>oops</html>"))

    response = client.get("/api/youtube", params={"channel": "@test"})

    assert response.status_code == 404
    assert response.json()["ok"] is False


def test_search_error_surfaces_as_server_error():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/search"):
            return httpx.Response(403, json={"error": {"message": "quotaExceeded"}})
        return httpx.Response(200, json={"items": []})

    client = _make_client(handler)

    response = client.get("/api/youtube", params={"channel": "@test"})

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "quotaExceeded"}


def test_stats_failure_is_bad_gateway():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"error": {"message": "API key not valid."}})

    client = _make_client(handler)

    response = client.get("/api/youtube", params={"channel": "UCabc1234567", "refresh": "120"})

    assert response.status_code == 502
    assert response.json() == {"ok": False, "error": "API key not valid."}
    assert response.headers["cache-control"] == "public, s-maxage=120, stale-while-revalidate=60"


def test_hidden_subscriber_count_is_not_found():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"items": [{"statistics": {"hiddenSubscriberCount": True}}]})

    client = _make_client(handler)

    response = client.get("/api/youtube", params={"channel": "UCabc1234567"})

    assert response.status_code == 404
    assert response.json() == {"ok": False, "error": "Subscriber count not available."}


def test_transport_error_is_server_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _make_client(handler)

    response = client.get("/api/youtube", params={"channel": "@test"})

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "connection refused"}


def test_healthcheck():
    client = _make_client(_no_requests)

    assert client.get("/healthz").json() == {"status": "ok"}
