"""Number validators. Bounds are inclusive."""

from __future__ import annotations

from typing import Any, TypeGuard

from remote_data.validators.core import Validator, custom, custom_guarded


def is_number(error_msg: str) -> Validator[Any, float]:
    """Check the value is an int or float. Booleans are rejected."""

    def guard(value: Any) -> TypeGuard[float]:
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    return custom_guarded(guard, error_msg)


def min(error_msg: str, minimum: float) -> Validator[float, float]:  # noqa: A001
    return custom(lambda value: value >= minimum, error_msg)


def max(error_msg: str, maximum: float) -> Validator[float, float]:  # noqa: A001
    return custom(lambda value: value <= maximum, error_msg)
