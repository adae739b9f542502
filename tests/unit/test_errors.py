"""Unit tests for HttpFailure and the exception-to-kind mapping."""

from __future__ import annotations

import json

import httpx
import pytest

from remote_data.errors import FailureKind, HttpFailure, kind_for_status

URL = "https://api.example.com/users/1"


def _status_error(status_code: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", URL)
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(f"status {status_code}", request=request, response=response)


class TestKindForStatus:
    @pytest.mark.parametrize("status_code", [400, 401, 404, 499])
    def test_4xx_is_client_error(self, status_code: int) -> None:
        assert kind_for_status(status_code) is FailureKind.CLIENT_ERROR

    @pytest.mark.parametrize("status_code", [500, 503, 302])
    def test_everything_else_is_server_error(self, status_code: int) -> None:
        assert kind_for_status(status_code) is FailureKind.SERVER_ERROR


class TestFromException:
    def test_status_error(self) -> None:
        failure = HttpFailure.from_exception("GET", URL, _status_error(404))
        assert failure.kind is FailureKind.CLIENT_ERROR
        assert failure.status_code == 404
        assert failure.message == f"GET {URL} failed with status 404"

    @pytest.mark.parametrize(
        "exception,kind",
        [
            (httpx.ReadTimeout("slow"), FailureKind.TIMEOUT_ERROR),
            (httpx.PoolTimeout("busy"), FailureKind.TIMEOUT_ERROR),
            (httpx.ConnectError("refused"), FailureKind.NETWORK_ERROR),
            (httpx.RemoteProtocolError("bad frame"), FailureKind.NETWORK_ERROR),
            (json.JSONDecodeError("Expecting value", "{", 1), FailureKind.DECODE_ERROR),
            (httpx.TooManyRedirects("loop"), FailureKind.UNKNOWN_ERROR),
        ],
    )
    def test_exception_kinds(self, exception: Exception, kind: FailureKind) -> None:
        failure = HttpFailure.from_exception("GET", URL, exception)
        assert failure.kind is kind
        assert failure.status_code is None
        assert failure.message.startswith(f"GET {URL} failed: ")
        assert failure.exception is exception


class TestHttpFailure:
    def test_equality_ignores_exception_and_timestamp(self) -> None:
        first = HttpFailure.from_exception("GET", URL, _status_error(500))
        second = HttpFailure.from_exception("GET", URL, _status_error(500))
        assert first == second

    def test_is_frozen(self) -> None:
        failure = HttpFailure(FailureKind.UNKNOWN_ERROR, "boom")
        with pytest.raises(AttributeError):
            failure.message = "other"  # type: ignore[misc]

    def test_full_stack_trace_without_exception(self) -> None:
        assert HttpFailure(FailureKind.UNKNOWN_ERROR, "boom").full_stack_trace() == "boom"

    def test_full_stack_trace_with_exception(self) -> None:
        try:
            raise httpx.ConnectError("refused")
        except httpx.ConnectError as exc:
            failure = HttpFailure.from_exception("GET", URL, exc)
        trace = failure.full_stack_trace()
        assert trace.startswith(failure.message)
        assert "ConnectError: refused" in trace
