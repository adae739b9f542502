"""
Test assertions for Result and RemoteData values.

Expressive assert helpers that produce clear failure messages and hand back
the unwrapped payload:

    from remote_data.assertions import RemoteDataAssertions, ResultAssertions

    def test_parse_age():
        age = ResultAssertions.assert_ok(parse_age("42"))
        assert age == 42

    async def test_fetch_user():
        failure = RemoteDataAssertions.assert_failure(await fetch_user(404))
        assert failure.status_code == 404
"""

from __future__ import annotations

from typing import Any, TypeVar

from remote_data.remote import Failure, Loading, NotAsked, RemoteData, Success
from remote_data.result import Err, Ok, Result

E = TypeVar("E")
V = TypeVar("V")


def _context(message: str) -> str:
    return f" — {message}" if message else ""


class ResultAssertions:
    """Assertions for Result values."""

    @staticmethod
    def assert_ok(result: Result[E, V], message: str = "") -> V:
        """
        Assert the Result is Ok and return the value.

            value = ResultAssertions.assert_ok(result)
        """
        assert isinstance(result, Ok), f"Expected Ok but got {result!r}{_context(message)}"
        return result.value

    @staticmethod
    def assert_ok_value(result: Result[E, V], expected_value: Any) -> None:
        """Assert the Result is Ok with the specific value."""
        value = ResultAssertions.assert_ok(result)
        assert value == expected_value, (
            f"Expected Ok value {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_err(result: Result[E, V], message: str = "") -> E:
        """Assert the Result is Err and return the error payload."""
        assert isinstance(result, Err), f"Expected Err but got {result!r}{_context(message)}"
        return result.error

    @staticmethod
    def assert_err_value(result: Result[E, V], expected_error: Any) -> None:
        """Assert the Result is Err with the specific error payload."""
        error = ResultAssertions.assert_err(result)
        assert error == expected_error, (
            f"Expected error {expected_error!r} but got {error!r}"
        )


class RemoteDataAssertions:
    """Assertions for RemoteData values."""

    @staticmethod
    def assert_success(remote: RemoteData[E, V], message: str = "") -> V:
        """Assert the RemoteData is Success and return the value."""
        assert isinstance(remote, Success), (
            f"Expected Success but got {remote!r}{_context(message)}"
        )
        return remote.value

    @staticmethod
    def assert_failure(remote: RemoteData[E, V], message: str = "") -> E:
        """Assert the RemoteData is Failure and return the error payload."""
        assert isinstance(remote, Failure), (
            f"Expected Failure but got {remote!r}{_context(message)}"
        )
        return remote.error

    @staticmethod
    def assert_not_asked(remote: RemoteData[E, V], message: str = "") -> None:
        assert isinstance(remote, NotAsked), (
            f"Expected NotAsked but got {remote!r}{_context(message)}"
        )

    @staticmethod
    def assert_loading(remote: RemoteData[E, V], message: str = "") -> None:
        assert isinstance(remote, Loading), (
            f"Expected Loading but got {remote!r}{_context(message)}"
        )
