"""
Result container — the binary success/failure value.

A Result[E, V] is either Ok(value: V) or Err(error: E). Both variants are
frozen dataclasses, so a Result is a plain immutable value that can be
destructured with match/case:

    match parse_age(raw):
        case Ok(age):
            ...
        case Err(message):
            ...

Combinators are module-level functions taking the container first, so
pipelines read left to right:

    ┌──────────┐   and_then   ┌──────────┐   map    ┌──────────┐
    │  parse   │──Ok─────────→│ validate │──Ok─────→│  format  │──→ Result[E, V]
    └────┬─────┘              └────┬─────┘          └────┬─────┘
         │ Err                     │ Err                 │ Err
         └─────────────────────────┴─────────────────────┴──→ Result[E, V]

Failure states are data: no combinator raises on account of a container's tag.
Exceptions raised by caller-supplied functions are NOT caught — a mapper that
raises is a programmer error, not a domain failure.

Async variants take a pending container (any awaitable resolving to a Result)
and return a coroutine. Variants with the `_f` suffix take an ordinary
container and an async function instead.
"""

from __future__ import annotations

import asyncio
import numbers
from collections.abc import Awaitable, Callable, Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Generic, TypeGuard, TypeVar, Union, overload

E = TypeVar("E")
F = TypeVar("F")
V = TypeVar("V")
U = TypeVar("U")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Ok(Generic[V]):
    """The success variant — wraps a value of type V."""

    value: V


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """The failure variant — wraps an error payload of type E."""

    error: E


Result = Union[Err[E], Ok[V]]
"""Either Err(error) or Ok(value). Subscript as Result[ErrorType, ValueType]."""

AsyncResult = Awaitable[Union[Err[E], Ok[V]]]
"""A pending Result: anything that can be awaited to obtain a Result."""


# ──────────────────────── Introspection ────────────────────────


def is_ok(result: Result[E, V]) -> TypeGuard[Ok[V]]:
    """Check if this Result is Ok."""
    return isinstance(result, Ok)


def is_err(result: Result[E, V]) -> TypeGuard[Err[E]]:
    """Check if this Result is Err."""
    return isinstance(result, Err)


# ──────────────────────── Core Transformations ────────────────────────


def map(result: Result[E, V], f: Callable[[V], U]) -> Result[E, U]:  # noqa: A001
    """
    Transform the success value. Err passes through untouched.

        map(Ok(5), lambda x: x * 2)     # → Ok(10)
        map(Err("e"), lambda x: x * 2)  # → Err("e")
    """
    match result:
        case Ok(value):
            return Ok(f(value))
        case Err():
            return result
    raise TypeError(f"Expected Ok or Err, got {result!r}")


def map_error(result: Result[E, V], f: Callable[[E], F]) -> Result[F, V]:
    """Transform the error payload. Ok passes through untouched."""
    match result:
        case Err(error):
            return Err(f(error))
        case Ok():
            return result
    raise TypeError(f"Expected Ok or Err, got {result!r}")


def map_both(
    result: Result[E, V],
    f_err: Callable[[E], F],
    f_ok: Callable[[V], U],
) -> Result[F, U]:
    """
    Apply f_err on Err or f_ok on Ok. Only the relevant branch runs.

    Same as map_error(map(result, f_ok), f_err).
    """
    match result:
        case Err(error):
            return Err(f_err(error))
        case Ok(value):
            return Ok(f_ok(value))
    raise TypeError(f"Expected Ok or Err, got {result!r}")


def and_then(result: Result[E, V], f: Callable[[V], Result[E, U]]) -> Result[E, U]:
    """
    Chain a Result-returning function. Short-circuits on Err.

    Also known as bind or flat_map. `f` is never called for an Err.

        and_then(Ok("42"), parse_int)   # → parse_int("42")
        and_then(Err("e"), parse_int)   # → Err("e")
    """
    match result:
        case Ok(value):
            return f(value)
        case Err():
            return result
    raise TypeError(f"Expected Ok or Err, got {result!r}")


def join(result: Result[E, Result[E, V]]) -> Result[E, V]:
    """Flatten a nested Result: Ok(Ok(v)) → Ok(v), Ok(Err(e)) → Err(e)."""
    match result:
        case Ok(inner):
            return inner
        case Err():
            return result
    raise TypeError(f"Expected Ok or Err, got {result!r}")


def apply(result: Result[E, V], result_f: Result[E, Callable[[V], U]]) -> Result[E, U]:
    """
    Apply a function wrapped in a Result to a value wrapped in a Result.

    The function container decides: if it is Err, that Err is returned
    without looking at `result` at all.

        apply(Ok(5), Ok(lambda x: x + 1))  # → Ok(6)
        apply(Ok(5), Err("e"))             # → Err("e")
        apply(Err("e1"), Err("e2"))        # → Err("e2")
    """
    match result_f:
        case Ok(f):
            return map(result, f)
        case Err():
            return result_f
    raise TypeError(f"Expected Ok or Err, got {result_f!r}")


ap = apply


# ──────────────────────── Collections ────────────────────────


def sequence(results: Sequence[Result[E, V]]) -> Result[E, list[V]]:
    """
    Collect a sequence of Results into a Result of list.

    Values keep their input order. The first Err in iteration order wins
    and later elements are ignored. An empty input gives Ok([]).

        sequence([Ok(1), Ok(2)])              # → Ok([1, 2])
        sequence([Ok(1), Err("a"), Err("b")]) # → Err("a")
    """
    values_: list[V] = []
    for item in results:
        match item:
            case Ok(value):
                values_.append(value)
            case Err():
                return item
            case _:
                raise TypeError(f"Expected Ok or Err, got {item!r}")
    return Ok(values_)


def traverse(items: Sequence[A], f: Callable[[A], Result[E, V]]) -> Result[E, list[V]]:
    """
    Map each item through a Result-returning function, then sequence.

    Stops at the first Err: `f` is not called for the remaining items.
    """
    values_: list[V] = []
    for item in items:
        match f(item):
            case Ok(value):
                values_.append(value)
            case Err() as failed:
                return failed
            case other:
                raise TypeError(f"Expected Ok or Err, got {other!r}")
    return Ok(values_)


def values(results: Sequence[Result[E, V]]) -> list[V]:
    """Take every success value, throwing away the errors."""
    return [item.value for item in results if isinstance(item, Ok)]


@overload
def map_many(
    results: tuple[Result[E, A], Result[E, B]],
    f: Callable[[A, B], R],
) -> Result[E, R]: ...


@overload
def map_many(
    results: tuple[Result[E, A], Result[E, B], Result[E, C]],
    f: Callable[[A, B, C], R],
) -> Result[E, R]: ...


@overload
def map_many(
    results: tuple[Result[E, A], Result[E, B], Result[E, C], Result[E, D]],
    f: Callable[[A, B, C, D], R],
) -> Result[E, R]: ...


@overload
def map_many(results: Sequence[Result[E, Any]], f: Callable[..., R]) -> Result[E, R]: ...


def map_many(results: Sequence[Result[E, Any]], f: Callable[..., R]) -> Result[E, R]:
    """
    Apply `f` to the unwrapped values of a fixed-size tuple of Results.

    Typed for tuples of two to four slots; longer tuples fall back to the
    untyped sequence form. The first Err (left to right) wins.

        map_many((Ok("a"), Ok(1)), lambda s, n: f"{s}{n}")  # → Ok("a1")
    """
    return map(sequence(results), lambda args: f(*args))


# ──────────────────────── Unwrapping & Constructors ────────────────────────


def with_default(result: Result[E, V], default: V) -> V:
    """Return the Ok value, or `default` for an Err. Never raises."""
    match result:
        case Ok(value):
            return value
        case _:
            return default


def is_absent(value: Any) -> bool:
    """
    True for None and for a NaN of any numeric type.

    Covers float, complex, Decimal (quiet and signaling) and third-party
    number types registered with the `numbers` ABCs, such as numpy scalars.
    """
    if value is None:
        return True
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, numbers.Number) and not isinstance(value, bool):
        return value != value
    return False


def from_nullable(value: V | None, error: E) -> Result[E, V]:
    """
    Ok(value) unless value is None or NaN, which become Err(error).

    Falsy values such as 0, "" and False are present and give Ok.
    """
    if is_absent(value):
        return Err(error)
    return Ok(value)


def from_guarded(value: Any, error: E, guard: Callable[[Any], TypeGuard[V]]) -> Result[E, V]:
    """
    Ok(value) if `guard(value)` holds, else Err(error).

    The guard is a contract: when it returns True the caller vouches that
    `value` is a V.
    """
    return Ok(value) if guard(value) else Err(error)


# ──────────────────────── Async Support ────────────────────────


async def _gather(pendings: Iterable[Awaitable[Any]]) -> list[Any]:
    """
    Await every pending value concurrently, keeping input order.

    If one raises, the others are cancelled and awaited before the exception
    propagates, so no task outlives the call and no exception goes unretrieved.
    """
    tasks = [asyncio.ensure_future(pending) for pending in pendings]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def map_async(pending: AsyncResult[E, V], f: Callable[[V], U]) -> Result[E, U]:
    """
    Same as map, but over a pending Result.

        result = await map_async(fetch_user(user_id), lambda u: u.name)
    """
    return map(await pending, f)


async def map_async_f(result: Result[E, V], f: Callable[[V], Awaitable[U]]) -> Result[E, U]:
    """
    Same as map, but with an async function. Awaits `f` only for Ok.

        result = await map_async_f(Ok(user_id), fetch_user_from_api)
    """
    match result:
        case Ok(value):
            return Ok(await f(value))
        case Err():
            return result
    raise TypeError(f"Expected Ok or Err, got {result!r}")


async def map_error_async(pending: AsyncResult[E, V], f: Callable[[E], F]) -> Result[F, V]:
    """Same as map_error, but over a pending Result."""
    return map_error(await pending, f)


async def map_both_async(
    pending: AsyncResult[E, V],
    f_err: Callable[[E], F],
    f_ok: Callable[[V], U],
) -> Result[F, U]:
    """Same as map_both, but over a pending Result."""
    return map_both(await pending, f_err, f_ok)


async def and_then_async(
    pending: AsyncResult[E, V],
    f: Callable[[V], Result[E, U]],
) -> Result[E, U]:
    """Same as and_then, but over a pending Result."""
    return and_then(await pending, f)


async def and_then_async_f(
    result: Result[E, V],
    f: Callable[[V], AsyncResult[E, U]],
) -> Result[E, U]:
    """Same as and_then, but with a function returning a pending Result."""
    match result:
        case Ok(value):
            return await f(value)
        case Err():
            return result
    raise TypeError(f"Expected Ok or Err, got {result!r}")


async def and_then_async_rf(
    pending: AsyncResult[E, V],
    f: Callable[[V], AsyncResult[E, U]],
) -> Result[E, U]:
    """Same as and_then_async_f, but the input is also pending."""
    return await and_then_async_f(await pending, f)


async def apply_async(
    pending: AsyncResult[E, V],
    pending_f: AsyncResult[E, Callable[[V], U]],
) -> Result[E, U]:
    """Same as apply; both pending Results are awaited concurrently."""
    result, result_f = await _gather([pending, pending_f])
    return apply(result, result_f)


ap_async = apply_async


async def sequence_async(pendings: Sequence[AsyncResult[E, V]]) -> Result[E, list[V]]:
    """
    Await every pending Result concurrently, then sequence them.

    All awaitables are started before any is awaited. The fold runs in the
    input order regardless of which one settles first.
    """
    return sequence(await _gather(pendings))


async def traverse_async_f(
    items: Sequence[A],
    f: Callable[[A], AsyncResult[E, V]],
) -> Result[E, list[V]]:
    """Start `f` for every item at once, then sequence in input order."""
    return await sequence_async([f(item) for item in items])


async def map_many_async(
    pendings: Sequence[AsyncResult[E, Any]],
    f: Callable[..., R],
) -> Result[E, R]:
    """Same as map_many, but over pending Results awaited concurrently."""
    return map(await sequence_async(pendings), lambda args: f(*args))


async def map_many_async_f(
    results: Sequence[Result[E, Any]],
    f: Callable[..., Awaitable[R]],
) -> Result[E, R]:
    """Same as map_many, but with an async function."""
    return await map_async_f(sequence(results), lambda args: f(*args))


async def with_default_async(pending: AsyncResult[E, V], default: V) -> V:
    """Same as with_default, but over a pending Result."""
    return with_default(await pending, default)
