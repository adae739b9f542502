"""
Object validators — validate the fields of a mapping against a schema.

    user = schema("invalid user", {
        "name": string.min("name too short", 2),
        "email": string.is_email("invalid email"),
        "address": schema("invalid address", {
            "zip": string.only_numbers("zip must be digits"),
        }),
    })

Two failure modes exist and must not be confused:

  - a present field whose validator rejects it: the field's messages are
    accumulated with those of the other fields;
  - a missing field: the whole validation stops with Err([error_msg]),
    dropping any messages collected so far.

By default a field counts as missing when its value is falsy, so 0, "",
False and empty collections are "missing" too. Pass presence="explicit" to
treat only absent keys as missing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from remote_data.result import Err, Ok
from remote_data.validators.core import Validated, Validator, keep_first

Presence = Literal["truthy", "explicit"]


def schema(
    error_msg: str,
    validators: Mapping[str, Validator[Any, Any]],
    *,
    presence: Presence = "truthy",
) -> Validator[Mapping[str, Any], Mapping[str, Any]]:
    """
    Validate each field named in `validators`, in the schema's key order.

    Extra fields of the input are ignored. On success the input mapping is
    returned unchanged.
    """
    if presence not in ("truthy", "explicit"):
        raise ValueError(f"presence must be 'truthy' or 'explicit', got {presence!r}")

    def is_present(obj: Mapping[str, Any], key: str) -> bool:
        if presence == "explicit":
            return key in obj
        return bool(obj.get(key))

    def validate(obj: Mapping[str, Any]) -> Validated[Mapping[str, Any]]:
        validated: Validated[Mapping[str, Any]] = Ok(obj)
        for key, validator in validators.items():
            if not is_present(obj, key):
                return Err([error_msg])
            validated = keep_first(validated, validator(obj[key]))
        return validated

    return validate
