"""
Unit tests for the HTTP adapter — httpx requests settled into WebData.

Uses respx to mock httpx HTTP calls (never makes real HTTP requests).

Test categories:
  - Success: 2xx response → Success(body), body decoded by content type
  - Client/server errors: 4xx/5xx → Failure(HttpFailure) with the status
  - Timeout/network: → Failure (never raises)
  - Malformed response: → Failure(DECODE_ERROR) (never raises)
  - Client handling: settings, shared clients, header precedence
"""

from __future__ import annotations

import json

import httpx
import pytest
import respx
from structlog.testing import capture_logs

from remote_data import http_client
from remote_data.assertions import RemoteDataAssertions
from remote_data.config import ClientSettings
from remote_data.errors import FailureKind, HttpFailure

# ─────────────────────── Fixtures ───────────────────────

BASE_URL = "https://api.example.com"
USERS_URL = f"{BASE_URL}/users"
USER_URL = f"{BASE_URL}/users/1"


@pytest.fixture()
def settings() -> ClientSettings:
    """Explicit settings so tests never depend on the environment."""
    return ClientSettings(timeout_seconds=5)


# ═══════════════════════════════════════════════════════════════════════
# 1. Success
# ═══════════════════════════════════════════════════════════════════════


class TestSuccess:
    """
    GIVEN a server answering with a 2xx status
    WHEN a verb function is awaited
    THEN it settles to Success(body).
    """

    @pytest.mark.asyncio
    @respx.mock
    async def test_json_body_is_decoded(self, settings: ClientSettings) -> None:
        """
        GIVEN the server responds 200 with a JSON body
        WHEN get is awaited
        THEN it returns Success(decoded JSON).
        """
        respx.get(USER_URL).mock(return_value=httpx.Response(200, json={"id": 1, "name": "Ada"}))
        body = RemoteDataAssertions.assert_success(await http_client.get(USER_URL, settings=settings))
        assert body == {"id": 1, "name": "Ada"}

    @pytest.mark.asyncio
    @respx.mock
    async def test_text_body(self, settings: ClientSettings) -> None:
        respx.get(USER_URL).mock(return_value=httpx.Response(200, text="hello"))
        assert RemoteDataAssertions.assert_success(await http_client.get(USER_URL, settings=settings)) == "hello"

    @pytest.mark.asyncio
    @respx.mock
    async def test_empty_body_is_none(self, settings: ClientSettings) -> None:
        respx.delete(USER_URL).mock(return_value=httpx.Response(204))
        assert RemoteDataAssertions.assert_success(await http_client.delete(USER_URL, settings=settings)) is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_post_sends_json(self, settings: ClientSettings) -> None:
        """
        GIVEN a JSON payload
        WHEN post is awaited
        THEN the payload is sent as the request body and the response decoded.
        """
        route = respx.post(USERS_URL).mock(return_value=httpx.Response(201, json={"id": 2}))
        outcome = await http_client.post(USERS_URL, json={"name": "Grace"}, settings=settings)
        assert RemoteDataAssertions.assert_success(outcome) == {"id": 2}
        assert json.loads(route.calls.last.request.content) == {"name": "Grace"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("verb,method", [("put", "PUT"), ("patch", "PATCH"), ("delete", "DELETE")])
    @respx.mock
    async def test_every_verb_uses_its_method(self, settings: ClientSettings, verb: str, method: str) -> None:
        route = respx.route(method=method, url=USER_URL).mock(return_value=httpx.Response(200, json={}))
        outcome = await getattr(http_client, verb)(USER_URL, settings=settings)
        assert RemoteDataAssertions.assert_success(outcome) == {}
        assert route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_upper_cases_method(self, settings: ClientSettings) -> None:
        route = respx.get(USER_URL).mock(return_value=httpx.Response(200, json={}))
        await http_client.request("get", USER_URL, settings=settings)
        assert route.calls.last.request.method == "GET"

    @pytest.mark.asyncio
    @respx.mock
    async def test_query_params(self, settings: ClientSettings) -> None:
        route = respx.get(USERS_URL).mock(return_value=httpx.Response(200, json=[]))
        await http_client.get(USERS_URL, params={"page": 2}, settings=settings)
        assert route.calls.last.request.url.params["page"] == "2"


# ═══════════════════════════════════════════════════════════════════════
# 2. Status Errors
# ═══════════════════════════════════════════════════════════════════════


class TestStatusErrors:
    """
    GIVEN a server answering with a non-2xx status
    WHEN a verb function is awaited
    THEN it settles to Failure(HttpFailure) carrying the status.
    """

    @pytest.mark.asyncio
    @respx.mock
    async def test_404_is_client_error(self, settings: ClientSettings) -> None:
        """
        GIVEN the server responds 404
        WHEN get is awaited
        THEN it returns Failure(CLIENT_ERROR) naming the request.
        """
        respx.get(USER_URL).mock(return_value=httpx.Response(404, json={"error": "not found"}))
        failure = RemoteDataAssertions.assert_failure(await http_client.get(USER_URL, settings=settings))
        assert isinstance(failure, HttpFailure)
        assert failure.kind is FailureKind.CLIENT_ERROR
        assert failure.status_code == 404
        assert f"GET {USER_URL}" in failure.message

    @pytest.mark.asyncio
    @respx.mock
    async def test_500_is_server_error(self, settings: ClientSettings) -> None:
        respx.post(USERS_URL).mock(return_value=httpx.Response(500))
        failure = RemoteDataAssertions.assert_failure(await http_client.post(USERS_URL, settings=settings))
        assert failure.kind is FailureKind.SERVER_ERROR
        assert failure.status_code == 500
        assert failure.method == "POST"
        assert failure.url == USERS_URL


# ═══════════════════════════════════════════════════════════════════════
# 3. Transport Errors
# ═══════════════════════════════════════════════════════════════════════


class TestTransportErrors:
    """
    GIVEN the request never gets a usable response
    WHEN a verb function is awaited
    THEN it returns Failure (does not raise).
    """

    @pytest.mark.asyncio
    @respx.mock
    async def test_timeout(self, settings: ClientSettings) -> None:
        respx.get(USER_URL).mock(side_effect=httpx.ConnectTimeout("timed out"))
        failure = RemoteDataAssertions.assert_failure(await http_client.get(USER_URL, settings=settings))
        assert failure.kind is FailureKind.TIMEOUT_ERROR
        assert failure.status_code is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_connection_refused(self, settings: ClientSettings) -> None:
        respx.get(USER_URL).mock(side_effect=httpx.ConnectError("connection refused"))
        failure = RemoteDataAssertions.assert_failure(await http_client.get(USER_URL, settings=settings))
        assert failure.kind is FailureKind.NETWORK_ERROR
        assert "connection refused" in failure.message

    @pytest.mark.asyncio
    @respx.mock
    async def test_malformed_json(self, settings: ClientSettings) -> None:
        """
        GIVEN the server declares JSON but sends garbage
        WHEN get is awaited
        THEN it returns Failure(DECODE_ERROR).
        """
        respx.get(USER_URL).mock(
            return_value=httpx.Response(200, content=b"{not json", headers={"content-type": "application/json"})
        )
        failure = RemoteDataAssertions.assert_failure(await http_client.get(USER_URL, settings=settings))
        assert failure.kind is FailureKind.DECODE_ERROR
        assert failure.exception is not None


# ═══════════════════════════════════════════════════════════════════════
# 4. Client Handling
# ═══════════════════════════════════════════════════════════════════════


class TestClientHandling:
    @pytest.mark.asyncio
    @respx.mock
    async def test_base_url_from_settings(self) -> None:
        route = respx.get(USER_URL).mock(return_value=httpx.Response(200, json={}))
        await http_client.get("/users/1", settings=ClientSettings(base_url=BASE_URL))
        assert route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_settings_loaded_from_environment(self, monkeypatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("REMOTE_DATA_BASE_URL", BASE_URL)
        route = respx.get(USER_URL).mock(return_value=httpx.Response(200, json={}))
        await http_client.get("/users/1")
        assert route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_headers_merge_with_default_headers(self) -> None:
        settings = ClientSettings(headers={"Accept": "application/json", "X-Tenant": "default"})
        route = respx.get(USER_URL).mock(return_value=httpx.Response(200, json={}))
        await http_client.get(USER_URL, headers={"X-Tenant": "acme"}, settings=settings)
        sent = route.calls.last.request.headers
        assert sent["accept"] == "application/json"
        assert sent["x-tenant"] == "acme"

    @pytest.mark.asyncio
    @respx.mock
    async def test_shared_client_is_used_and_left_open(self) -> None:
        route = respx.get(USER_URL).mock(return_value=httpx.Response(200, json={"id": 1}))
        async with httpx.AsyncClient(base_url=BASE_URL) as client:
            first = await http_client.get("/users/1", client=client)
            second = await http_client.get("/users/1", client=client)
            assert not client.is_closed
        assert first == second
        assert route.call_count == 2


# ═══════════════════════════════════════════════════════════════════════
# 5. Logging
# ═══════════════════════════════════════════════════════════════════════


class TestLogging:
    @pytest.mark.asyncio
    @respx.mock
    async def test_success_is_logged(self, settings: ClientSettings) -> None:
        respx.get(USER_URL).mock(return_value=httpx.Response(200, json={}))
        with capture_logs() as logs:
            await http_client.get(USER_URL, settings=settings)
        assert logs == [
            {
                "event": "http.request.succeeded",
                "component": "http",
                "log_level": "info",
                "method": "GET",
                "url": USER_URL,
                "status_code": 200,
            }
        ]

    @pytest.mark.asyncio
    @respx.mock
    async def test_failure_is_logged_as_warning(self, settings: ClientSettings) -> None:
        respx.get(USER_URL).mock(return_value=httpx.Response(503))
        with capture_logs() as logs:
            await http_client.get(USER_URL, settings=settings)
        assert len(logs) == 1
        assert logs[0]["event"] == "http.request.failed"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["kind"] == "SERVER_ERROR"
        assert logs[0]["status_code"] == 503
        assert logs[0]["component"] == "http"
