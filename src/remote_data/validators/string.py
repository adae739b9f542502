"""
String validators.

Length bounds are inclusive. Regex validators search the whole string, so
a pattern matches anywhere unless it anchors itself; the `only_*` validators
are anchored at both ends.

    password = many([
        has_lowcase("no lowercase letters"),
        has_upcase("no uppercase letters"),
        has_number("no numbers"),
        min("less than 5 chars", 5),
    ])

    phone = separated("invalid amount of blocks", "-", [
        many([only_numbers("not a number"), length("wrong length", 3)]),
        many([only_numbers("not a number"), length("wrong length", 4)]),
    ])
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any, TypeGuard

from remote_data import result
from remote_data.validators import array
from remote_data.validators.core import Validated, Validator, custom, custom_guarded

_EMAIL = re.compile(
    r'^(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))\Z"
)


# ──────────────────────── Basic ────────────────────────


def is_string(error_msg: str) -> Validator[Any, str]:
    """Check that the value is a str."""

    def guard(value: Any) -> TypeGuard[str]:
        return isinstance(value, str)

    return custom_guarded(guard, error_msg)


def min(error_msg: str, min_chars: int) -> Validator[str, str]:  # noqa: A001
    """At least `min_chars` characters."""
    return custom(lambda value: len(value) >= min_chars, error_msg)


def max(error_msg: str, max_chars: int) -> Validator[str, str]:  # noqa: A001
    """At most `max_chars` characters."""
    return custom(lambda value: len(value) <= max_chars, error_msg)


def length(error_msg: str, chars: int) -> Validator[str, str]:
    """Exactly `chars` characters."""
    return custom(lambda value: len(value) == chars, error_msg)


def regex(error_msg: str, pattern: str | re.Pattern[str]) -> Validator[str, str]:
    """Check that `pattern` (source string or compiled) matches somewhere in the value."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    return custom(lambda value: compiled.search(value) is not None, error_msg)


# ──────────────────────── Character Classes ────────────────────────


def has_lowcase(error_msg: str, at_least: int = 1) -> Validator[str, str]:
    """At least `at_least` lower case letters."""
    return regex(error_msg, f"([a-z].*){{{at_least}}}")


def only_lowcases(error_msg: str) -> Validator[str, str]:
    return regex(error_msg, r"^[a-z]*\Z")


def has_upcase(error_msg: str, at_least: int = 1) -> Validator[str, str]:
    """At least `at_least` upper case letters."""
    return regex(error_msg, f"([A-Z].*){{{at_least}}}")


def only_upcases(error_msg: str) -> Validator[str, str]:
    return regex(error_msg, r"^[A-Z]*\Z")


def has_number(error_msg: str, at_least: int = 1) -> Validator[str, str]:
    """At least `at_least` digits."""
    return regex(error_msg, f"([0-9].*){{{at_least}}}")


def only_numbers(error_msg: str) -> Validator[str, str]:
    return regex(error_msg, r"^[0-9]*\Z")


def is_email(error_msg: str) -> Validator[str, str]:
    """Check the value looks like an e-mail address."""
    return regex(error_msg, _EMAIL)


# ──────────────────────── Structured ────────────────────────


def separated(
    error_msg: str,
    separator: str,
    validators: Sequence[Validator[str, Any]],
) -> Validator[str, str]:
    """
    Split on `separator` and validate each block with its positional validator.

    A block count different from the number of validators adds `error_msg`;
    block errors are accumulated after it. On success the blocks are joined
    back with the separator.

        separated("bad blocks", "-", [only_numbers("nan"), only_numbers("nan")])("12-34")
        # → Ok("12-34")
    """

    def validate(value: str) -> Validated[str]:
        blocks = value.split(separator) if separator else list(value)
        validated = array.each(error_msg, validators)(blocks)
        return result.map(validated, lambda valid_blocks: separator.join(valid_blocks))

    return validate
