"""Array (list) validators."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from typing import Any, TypeVar

from remote_data.result import Err, Ok
from remote_data.validators.core import Validated, Validator, keep_first

T = TypeVar("T")


def length(error_msg: str, amount: int) -> Validator[Sequence[T], Sequence[T]]:
    """Exactly `amount` elements."""

    def validate(items: Sequence[T]) -> Validated[Sequence[T]]:
        return Ok(items) if len(items) == amount else Err([error_msg])

    return validate


def every(validator: Validator[T, Any]) -> Validator[Sequence[T], Sequence[T]]:
    """
    Validate every element with the same validator.

    Errors of all failing elements are accumulated in element order.
    """

    def validate(items: Sequence[T]) -> Validated[Sequence[T]]:
        return reduce(
            lambda validated, item: keep_first(validated, validator(item)),
            items,
            Ok(items),
        )

    return validate


def each(
    error_msg: str,
    validators: Sequence[Validator[T, Any]],
) -> Validator[Sequence[T], Sequence[T]]:
    """
    Validate elements positionally, one validator per index.

    The fold is seeded with the length check against len(validators), so a
    length mismatch (`error_msg`) is reported together with, and before, any
    positional errors. Elements past the last validator are not checked.
    """
    check_length = length(error_msg, len(validators))

    def validate(items: Sequence[T]) -> Validated[Sequence[T]]:
        positional = [validator(item) for validator, item in zip(validators, items)]
        return reduce(keep_first, positional, check_length(items))

    return validate
