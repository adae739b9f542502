"""
Failure description for the HTTP transport — the error payload of WebData.

The containers themselves treat errors as opaque data. This module defines
the payload produced by remote_data.http_client, so callers matching on
Failure(error) get a structured value instead of a raw exception.
"""

from __future__ import annotations

import json
import traceback
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum, unique

import httpx


@unique
class FailureKind(Enum):
    """Why a request settled as a Failure."""

    CLIENT_ERROR = "CLIENT_ERROR"
    """The server answered with a 4xx status."""

    SERVER_ERROR = "SERVER_ERROR"
    """The server answered with a 5xx status (or any other non-2xx status)."""

    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    """Connecting, writing, reading or acquiring a pooled connection timed out."""

    NETWORK_ERROR = "NETWORK_ERROR"
    """The request never got a response: DNS, refused connection, protocol error."""

    DECODE_ERROR = "DECODE_ERROR"
    """The response declared JSON but the body could not be decoded."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    """Any other httpx error."""


@dataclass(frozen=True, slots=True)
class HttpFailure:
    """
    Immutable description of a failed request.

    >>> failure = HttpFailure(FailureKind.CLIENT_ERROR, "GET https://x/y failed with status 404")
    >>> failure.kind
    <FailureKind.CLIENT_ERROR: 'CLIENT_ERROR'>
    """

    kind: FailureKind
    message: str
    method: str = ""
    url: str = ""
    status_code: int | None = None
    exception: BaseException | None = field(default=None, repr=False, compare=False)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC), compare=False)

    @staticmethod
    def from_exception(method: str, url: str, exception: BaseException) -> HttpFailure:
        """Describe an exception raised while sending `method url` or reading its body."""
        kind = _map_exception_to_kind(exception)
        status_code = None
        if isinstance(exception, httpx.HTTPStatusError):
            status_code = exception.response.status_code
            message = f"{method} {url} failed with status {status_code}"
        else:
            message = f"{method} {url} failed: {exception}"
        return HttpFailure(
            kind=kind,
            message=message,
            method=method,
            url=url,
            status_code=status_code,
            exception=exception,
        )

    def full_stack_trace(self) -> str:
        """The message followed by the formatted exception chain, if any."""
        if self.exception is None:
            return self.message
        tb = "".join(
            traceback.format_exception(type(self.exception), self.exception, self.exception.__traceback__)
        )
        return f"{self.message}\n{tb}"


def kind_for_status(status_code: int) -> FailureKind:
    """Classify a non-2xx HTTP status."""
    if 400 <= status_code < 500:
        return FailureKind.CLIENT_ERROR
    return FailureKind.SERVER_ERROR


def _map_exception_to_kind(exception: BaseException) -> FailureKind:
    """Map an exception to the most appropriate FailureKind."""
    match exception:
        case httpx.HTTPStatusError():
            return kind_for_status(exception.response.status_code)
        case httpx.TimeoutException():
            return FailureKind.TIMEOUT_ERROR
        case httpx.TransportError():
            return FailureKind.NETWORK_ERROR
        case json.JSONDecodeError() | UnicodeDecodeError():
            return FailureKind.DECODE_ERROR
        case _:
            return FailureKind.UNKNOWN_ERROR
