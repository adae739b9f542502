"""
HTTP adapter — turns httpx requests into pending RemoteData values.

Every verb function returns a coroutine that settles to:
  - Success(body) on a 2xx response; the body is decoded JSON when the
    response declares a JSON content type, text otherwise, None when empty
  - Failure(HttpFailure) on a non-2xx status, timeout, transport error or
    undecodable JSON body

Transport problems never raise: they are captured into Failure so callers
can match on the result. Exceptions unrelated to the request (a malformed
URL, a bad argument) still propagate.

    user = await http_client.get("https://api.example.com/users/1")
    names = await remote.sequence_async([
        http_client.get(f"/users/{user_id}", client=shared_client)
        for user_id in ids
    ])

No retry, backoff or caching happens here.
"""

from __future__ import annotations

from functools import partial
from typing import Any, TypeVar, Union

import httpx

from remote_data.config import ClientSettings, load_settings
from remote_data.errors import HttpFailure
from remote_data.log import get_logger
from remote_data.remote import Failure, Loading, NotAsked, Success

T = TypeVar("T")

WebData = Union[NotAsked, Loading, Failure[HttpFailure], Success[T]]
"""RemoteData whose error payload is an HttpFailure."""

log = get_logger("http")


async def request(
    method: str,
    url: str,
    *,
    params: Any = None,
    data: Any = None,
    json: Any = None,
    headers: dict[str, str] | None = None,
    client: httpx.AsyncClient | None = None,
    settings: ClientSettings | None = None,
) -> WebData[Any]:
    """
    Send one request and settle it into a WebData.

    Pass `client` to reuse a connection pool; it is used as is and left
    open. Otherwise a client is built from `settings` (or the environment)
    and closed after the response is read.
    """
    method = method.upper()
    if client is not None:
        return await _send(client, method, url, params, data, json, headers)

    settings = settings or load_settings()
    async with httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=settings.timeout_seconds,
        follow_redirects=settings.follow_redirects,
        headers=settings.headers,
    ) as owned_client:
        return await _send(owned_client, method, url, params, data, json, headers)


async def _send(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    params: Any,
    data: Any,
    json: Any,
    headers: dict[str, str] | None,
) -> WebData[Any]:
    try:
        response = await client.request(
            method, url, params=params, data=data, json=json, headers=headers
        )
        response.raise_for_status()
    except httpx.HTTPError as exc:
        return _failed(method, url, exc)

    try:
        body = _decode_body(response)
    except ValueError as exc:
        return _failed(method, url, exc)

    log.info("http.request.succeeded", method=method, url=url, status_code=response.status_code)
    return Success(body)


def _decode_body(response: httpx.Response) -> Any:
    """JSON for JSON content types, text otherwise, None for an empty body."""
    if not response.content:
        return None
    if "json" in response.headers.get("content-type", ""):
        return response.json()
    return response.text


def _failed(method: str, url: str, exc: BaseException) -> Failure[HttpFailure]:
    failure = HttpFailure.from_exception(method, url, exc)
    log.warning(
        "http.request.failed",
        method=method,
        url=url,
        kind=failure.kind.value,
        status_code=failure.status_code,
        error=str(exc),
    )
    return Failure(failure)


get = partial(request, "GET")
post = partial(request, "POST")
put = partial(request, "PUT")
patch = partial(request, "PATCH")
delete = partial(request, "DELETE")
