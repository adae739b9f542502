"""
Validator core — lifting predicates into validators and combining them.

A validator is a plain function from a value to a Validated, which is a
Result whose error payload is always a list of messages:

    Validated[V] = Result[list[str], V]
    Validator[A, B] = Callable[[A], Validated[B]]

Unlike and_then/sequence, which stop at the first failure, the merge
operators here accumulate: every failing side contributes its messages, in
left-to-right order, without de-duplication.

    is_adult = custom(lambda age: age >= 18, "must be an adult")
    is_sane = custom(lambda age: age < 150, "unrealistic age")

    many([is_adult, is_sane])(200)  # → Err(["unrealistic age"])
    many([is_adult, is_sane])(-1)   # → Err(["must be an adult"])
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import reduce
from typing import Any, TypeGuard, TypeVar, Union

from remote_data.result import Err, Ok

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")

Validated = Union[Err[list[str]], Ok[T]]
"""Result specialised to a list of error messages."""

Validator = Callable[[A], Union[Err[list[str]], Ok[B]]]
"""A function from A to Validated[B]. Subscript as Validator[Input, Output]."""


def _errors(validated: Validated[Any]) -> list[str]:
    return validated.error if isinstance(validated, Err) else []


def merge_errors(validated1: Validated[Any], validated2: Validated[Any]) -> Validated[Any]:
    """Concatenate the error lists of both sides; an Ok side contributes nothing."""
    return Err([*_errors(validated1), *_errors(validated2)])


def keep_first(validated1: Validated[T], validated2: Validated[Any]) -> Validated[T]:
    """
    Merge two validated values, keeping the first payload.

    If both are Ok, `validated1` is returned. Otherwise the errors of both
    sides are concatenated.
    """
    if isinstance(validated1, Ok) and isinstance(validated2, Ok):
        return validated1
    return merge_errors(validated1, validated2)


def keep_second(validated1: Validated[Any], validated2: Validated[T]) -> Validated[T]:
    """Same as keep_first, but returns `validated2` when both are Ok."""
    if isinstance(validated1, Ok) and isinstance(validated2, Ok):
        return validated2
    return merge_errors(validated1, validated2)


def custom(predicate: Callable[[T], bool], error_msg: str) -> Validator[T, T]:
    """Validate a value with a boolean predicate."""

    def validate(value: T) -> Validated[T]:
        return Ok(value) if predicate(value) else Err([error_msg])

    return validate


def custom_guarded(predicate: Callable[[A], TypeGuard[B]], error_msg: str) -> Validator[A, B]:
    """
    Validate a value with a type guard, narrowing the success payload.

    The guard and the claimed output type form one contract: returning True
    means the value is a B. Nothing checks that the two agree.
    """

    def validate(value: A) -> Validated[B]:
        return Ok(value) if predicate(value) else Err([error_msg])

    return validate


def compose(validator1: Validator[T, Any], validator2: Validator[T, Any]) -> Validator[T, T]:
    """
    Run two validators on the same value and merge their outcomes.

    On full success the ORIGINAL value is returned, not either validator's
    output: composition is for independent checks, not for pipelining.
    """

    def validate(value: T) -> Validated[T]:
        validated1 = validator1(value)
        validated2 = validator2(value)
        if isinstance(validated1, Ok) and isinstance(validated2, Ok):
            return Ok(value)
        return merge_errors(validated1, validated2)

    return validate


def many(validators: Sequence[Validator[T, Any]]) -> Validator[T, T]:
    """
    Compose a non-empty list of validators into one.

    Errors of every failing validator are kept, in list order.
    """
    if not validators:
        raise ValueError("many() requires at least one validator")
    return reduce(compose, validators)


def not_(error_msg: str, validator: Validator[T, Any]) -> Validator[T, T]:
    """
    Flip a validator: its success becomes Err([error_msg]), its failure Ok(value).

    The wrapped validator's own messages are discarded.
    """

    def validate(value: T) -> Validated[T]:
        return Err([error_msg]) if isinstance(validator(value), Ok) else Ok(value)

    return validate
