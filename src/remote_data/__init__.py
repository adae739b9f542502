"""
Immutable, exhaustively-matchable containers for fallible and remote data.

Two containers share one combinator vocabulary:

  - Result[E, V]      Ok(value) | Err(error)
  - RemoteData[E, V]  NotAsked() | Loading() | Failure(error) | Success(value)

Combinators live in the `result` and `remote` modules; validators built on
Result live in `validators`.

    from remote_data import Ok, Err, result

    def parse_age(raw: str) -> Result[str, int]:
        return Ok(int(raw)) if raw.isdigit() else Err(f"not a number: {raw!r}")

    adult = result.and_then(
        parse_age("42"),
        lambda age: Ok(age) if age >= 18 else Err("too young"),
    )
"""

from remote_data import remote, result, validators
from remote_data.remote import (
    AsyncRemoteData,
    Failure,
    Loading,
    NotAsked,
    RemoteData,
    Success,
)
from remote_data.result import AsyncResult, Err, Ok, Result

__all__ = [
    "AsyncRemoteData",
    "AsyncResult",
    "Err",
    "Failure",
    "Loading",
    "NotAsked",
    "Ok",
    "RemoteData",
    "Result",
    "Success",
    "remote",
    "result",
    "validators",
]

__version__ = "1.0.0"
