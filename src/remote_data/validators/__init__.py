"""
Composable validators built on the Result container.

    from remote_data.validators import many, string

    password = many([
        string.has_lowcase("no lowercase letters"),
        string.has_number("no numbers"),
        string.min("too short", 8),
    ])
    password("abc")  # → Err(["no numbers", "too short"])
"""

from remote_data.validators import array, number, string
from remote_data.validators.core import (
    Validated,
    Validator,
    compose,
    custom,
    custom_guarded,
    keep_first,
    keep_second,
    many,
    merge_errors,
    not_,
)
from remote_data.validators.objects import schema

__all__ = [
    "Validated",
    "Validator",
    "array",
    "compose",
    "custom",
    "custom_guarded",
    "keep_first",
    "keep_second",
    "many",
    "merge_errors",
    "not_",
    "number",
    "schema",
    "string",
]
