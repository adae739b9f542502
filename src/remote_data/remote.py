"""
RemoteData container — the lifecycle of a remote fetch as a value.

A RemoteData[E, V] is one of four variants:

    NotAsked()        no request issued yet
    Loading()         request in flight
    Failure(error)    request settled with an error
    Success(value)    request settled with a payload

    NotAsked ──trigger──→ Loading ──settle──→ Failure(error) | Success(value)

The arrow above is how values usually evolve, but nothing enforces it:
every combinator accepts all four variants at any time. Combinators act on
Success only. NotAsked, Loading and Failure pass through as themselves and
are never collapsed into each other, so callers can keep matching on all
four tags to drive their UI:

    match user:
        case NotAsked():
            render_button()
        case Loading():
            render_spinner()
        case Failure(error):
            render_error(error)
        case Success(profile):
            render_profile(profile)

The API mirrors remote_data.result one for one, plus conversions to and
from Result.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeGuard, TypeVar, Union, overload

from remote_data.result import Err, Ok, Result, _gather, is_absent

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
class NotAsked:
    """No request has been made to fetch the data."""


@dataclass(frozen=True, slots=True)
class Loading:
    """A request to fetch the data is in flight."""


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """The request settled with an error."""

    error: E


@dataclass(frozen=True, slots=True)
class Success(Generic[V]):
    """The request settled with a payload."""

    value: V


RemoteData = Union[NotAsked, Loading, Failure[E], Success[V]]
"""One of the four lifecycle variants. Subscript as RemoteData[ErrorType, ValueType]."""

AsyncRemoteData = Awaitable[Union[NotAsked, Loading, Failure[E], Success[V]]]
"""A pending RemoteData: anything that can be awaited to obtain a RemoteData."""

# ──────────────────────── Introspection ────────────────────────


def is_not_asked(remote: RemoteData[E, V]) -> TypeGuard[NotAsked]:
    return isinstance(remote, NotAsked)


def is_loading(remote: RemoteData[E, V]) -> TypeGuard[Loading]:
    return isinstance(remote, Loading)


def is_failure(remote: RemoteData[E, V]) -> TypeGuard[Failure[E]]:
    return isinstance(remote, Failure)


def is_success(remote: RemoteData[E, V]) -> TypeGuard[Success[V]]:
    return isinstance(remote, Success)


# ──────────────────────── Core Transformations ────────────────────────


def map(remote: RemoteData[E, V], f: Callable[[V], U]) -> RemoteData[E, U]:  # noqa: A001
    """
    Transform the Success value. Every other variant is returned as is.

        map(Success(2), str)   # → Success("2")
        map(Loading(), str)    # → Loading()
    """
    match remote:
        case Success(value):
            return Success(f(value))
        case NotAsked() | Loading() | Failure():
            return remote
    raise TypeError(f"Expected NotAsked, Loading, Failure or Success, got {remote!r}")


def map_failure(remote: RemoteData[E, V], f: Callable[[E], F]) -> RemoteData[F, V]:
    """Transform the Failure error. Every other variant is returned as is."""
    match remote:
        case Failure(error):
            return Failure(f(error))
        case NotAsked() | Loading() | Success():
            return remote
    raise TypeError(f"Expected NotAsked, Loading, Failure or Success, got {remote!r}")


map_error = map_failure


def map_both(
    remote: RemoteData[E, V],
    f_err: Callable[[E], F],
    f_ok: Callable[[V], U],
) -> RemoteData[F, U]:
    """Apply f_err on Failure or f_ok on Success; NotAsked and Loading pass through."""
    match remote:
        case Failure(error):
            return Failure(f_err(error))
        case Success(value):
            return Success(f_ok(value))
        case NotAsked() | Loading():
            return remote
    raise TypeError(f"Expected NotAsked, Loading, Failure or Success, got {remote!r}")


def and_then(
    remote: RemoteData[E, V],
    f: Callable[[V], RemoteData[E, U]],
) -> RemoteData[E, U]:
    """Chain a RemoteData-returning function. Only Success reaches `f`."""
    match remote:
        case Success(value):
            return f(value)
        case NotAsked() | Loading() | Failure():
            return remote
    raise TypeError(f"Expected NotAsked, Loading, Failure or Success, got {remote!r}")


def join(remote: RemoteData[E, RemoteData[E, V]]) -> RemoteData[E, V]:
    """Flatten a nested RemoteData."""
    return and_then(remote, lambda inner: inner)


def apply(
    remote: RemoteData[E, V],
    remote_f: RemoteData[E, Callable[[V], U]],
) -> RemoteData[E, U]:
    """
    Apply a function wrapped in a RemoteData to a value wrapped in a RemoteData.

    Unless the function container is a Success it is returned unchanged,
    whatever `remote` holds.
    """
    match remote_f:
        case Success(f):
            return map(remote, f)
        case NotAsked() | Loading() | Failure():
            return remote_f
    raise TypeError(f"Expected NotAsked, Loading, Failure or Success, got {remote_f!r}")


ap = apply


# ──────────────────────── Collections ────────────────────────


def sequence(remotes: Sequence[RemoteData[E, V]]) -> RemoteData[E, list[V]]:
    """
    Collect a sequence of RemoteData into a RemoteData of list.

    The first non-Success element in iteration order is returned with its own
    tag (NotAsked, Loading or Failure). An empty input gives Success([]).
    """
    values_: list[V] = []
    for item in remotes:
        match item:
            case Success(value):
                values_.append(value)
            case NotAsked() | Loading() | Failure():
                return item
            case _:
                raise TypeError(f"Expected NotAsked, Loading, Failure or Success, got {item!r}")
    return Success(values_)


def traverse(
    items: Sequence[A],
    f: Callable[[A], RemoteData[E, V]],
) -> RemoteData[E, list[V]]:
    """Map each item through `f` and sequence. Stops calling `f` at the first non-Success."""
    values_: list[V] = []
    for item in items:
        match f(item):
            case Success(value):
                values_.append(value)
            case NotAsked() | Loading() | Failure() as settled:
                return settled
            case other:
                raise TypeError(f"Expected NotAsked, Loading, Failure or Success, got {other!r}")
    return Success(values_)


def values(remotes: Sequence[RemoteData[E, V]]) -> list[V]:
    """Take every Success value, dropping the other variants."""
    return [item.value for item in remotes if isinstance(item, Success)]


@overload
def map_many(
    remotes: tuple[RemoteData[E, A], RemoteData[E, B]],
    f: Callable[[A, B], R],
) -> RemoteData[E, R]: ...


@overload
def map_many(
    remotes: tuple[RemoteData[E, A], RemoteData[E, B], RemoteData[E, C]],
    f: Callable[[A, B, C], R],
) -> RemoteData[E, R]: ...


@overload
def map_many(
    remotes: tuple[RemoteData[E, A], RemoteData[E, B], RemoteData[E, C], RemoteData[E, D]],
    f: Callable[[A, B, C, D], R],
) -> RemoteData[E, R]: ...


@overload
def map_many(remotes: Sequence[RemoteData[E, Any]], f: Callable[..., R]) -> RemoteData[E, R]: ...


def map_many(remotes: Sequence[RemoteData[E, Any]], f: Callable[..., R]) -> RemoteData[E, R]:
    """
    Apply `f` to the unwrapped values of a fixed-size tuple of RemoteData.

        map_many((Success("a"), NotAsked(), Success(True)), f)  # → NotAsked()
        map_many((Success("a"), Loading(), Success(True)), f)   # → Loading()
    """
    return map(sequence(remotes), lambda args: f(*args))


# ──────────────────────── Unwrapping & Constructors ────────────────────────


def with_default(remote: RemoteData[E, V], default: V) -> V:
    """Return the Success value, or `default` for any other variant."""
    match remote:
        case Success(value):
            return value
        case _:
            return default


def from_nullable(value: V | None, error: E) -> RemoteData[E, V]:
    """Success(value) unless value is None or NaN, which become Failure(error)."""
    if is_absent(value):
        return Failure(error)
    return Success(value)


def from_guarded(
    value: Any,
    error: E,
    guard: Callable[[Any], TypeGuard[V]],
) -> RemoteData[E, V]:
    """Success(value) if `guard(value)` holds, else Failure(error)."""
    return Success(value) if guard(value) else Failure(error)


# ──────────────────────── Result Conversions ────────────────────────


def to_result(remote: RemoteData[E, V], default_error: E) -> Result[E, V]:
    """
    Convert to a Result.

        Success(v)  → Ok(v)
        Failure(e)  → Err(e)
        NotAsked()  → Err(default_error)
        Loading()   → Err(default_error)
    """
    match remote:
        case Success(value):
            return Ok(value)
        case Failure(error):
            return Err(error)
        case NotAsked() | Loading():
            return Err(default_error)
    raise TypeError(f"Expected NotAsked, Loading, Failure or Success, got {remote!r}")


def from_result(result: Result[E, V]) -> RemoteData[E, V]:
    """Convert a Result: Ok(v) → Success(v), Err(e) → Failure(e)."""
    match result:
        case Ok(value):
            return Success(value)
        case Err(error):
            return Failure(error)
    raise TypeError(f"Expected Ok or Err, got {result!r}")


# ──────────────────────── Async Support ────────────────────────


async def map_async(pending: AsyncRemoteData[E, V], f: Callable[[V], U]) -> RemoteData[E, U]:
    """Same as map, but over a pending RemoteData."""
    return map(await pending, f)


async def map_async_f(
    remote: RemoteData[E, V],
    f: Callable[[V], Awaitable[U]],
) -> RemoteData[E, U]:
    """Same as map, but with an async function. Awaits `f` only for Success."""
    match remote:
        case Success(value):
            return Success(await f(value))
        case NotAsked() | Loading() | Failure():
            return remote
    raise TypeError(f"Expected NotAsked, Loading, Failure or Success, got {remote!r}")


async def map_failure_async(
    pending: AsyncRemoteData[E, V],
    f: Callable[[E], F],
) -> RemoteData[F, V]:
    """Same as map_failure, but over a pending RemoteData."""
    return map_failure(await pending, f)


map_error_async = map_failure_async


async def map_both_async(
    pending: AsyncRemoteData[E, V],
    f_err: Callable[[E], F],
    f_ok: Callable[[V], U],
) -> RemoteData[F, U]:
    """Same as map_both, but over a pending RemoteData."""
    return map_both(await pending, f_err, f_ok)


async def and_then_async(
    pending: AsyncRemoteData[E, V],
    f: Callable[[V], RemoteData[E, U]],
) -> RemoteData[E, U]:
    """Same as and_then, but over a pending RemoteData."""
    return and_then(await pending, f)


async def and_then_async_f(
    remote: RemoteData[E, V],
    f: Callable[[V], AsyncRemoteData[E, U]],
) -> RemoteData[E, U]:
    """Same as and_then, but with a function returning a pending RemoteData."""
    match remote:
        case Success(value):
            return await f(value)
        case NotAsked() | Loading() | Failure():
            return remote
    raise TypeError(f"Expected NotAsked, Loading, Failure or Success, got {remote!r}")


async def and_then_async_rf(
    pending: AsyncRemoteData[E, V],
    f: Callable[[V], AsyncRemoteData[E, U]],
) -> RemoteData[E, U]:
    """Same as and_then_async_f, but the input is also pending."""
    return await and_then_async_f(await pending, f)


async def apply_async(
    pending: AsyncRemoteData[E, V],
    pending_f: AsyncRemoteData[E, Callable[[V], U]],
) -> RemoteData[E, U]:
    """Same as apply; both pending values are awaited concurrently."""
    remote, remote_f = await _gather([pending, pending_f])
    return apply(remote, remote_f)


ap_async = apply_async


async def sequence_async(pendings: Sequence[AsyncRemoteData[E, V]]) -> RemoteData[E, list[V]]:
    """
    Await every pending RemoteData concurrently, then sequence them.

    Settlement order does not matter: values and the winning non-Success
    element follow the input order.
    """
    return sequence(await _gather(pendings))


async def traverse_async_f(
    items: Sequence[A],
    f: Callable[[A], AsyncRemoteData[E, V]],
) -> RemoteData[E, list[V]]:
    """Start `f` for every item at once, then sequence in input order."""
    return await sequence_async([f(item) for item in items])


async def map_many_async(
    pendings: Sequence[AsyncRemoteData[E, Any]],
    f: Callable[..., R],
) -> RemoteData[E, R]:
    """Same as map_many, but over pending values awaited concurrently."""
    return map(await sequence_async(pendings), lambda args: f(*args))


async def map_many_async_f(
    remotes: Sequence[RemoteData[E, Any]],
    f: Callable[..., Awaitable[R]],
) -> RemoteData[E, R]:
    """Same as map_many, but with an async function."""
    return await map_async_f(sequence(remotes), lambda args: f(*args))


async def with_default_async(pending: AsyncRemoteData[E, V], default: V) -> V:
    """Same as with_default, but over a pending RemoteData."""
    return with_default(await pending, default)
