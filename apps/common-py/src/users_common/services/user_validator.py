"""Validation of inbound user payloads.

Violations are rendered as short human-readable messages naming the
offending key, e.g. ``"age" must be less than or equal to 150``.  They are
reported in field declaration order of :class:`UserPayload` followed by
unknown keys, so the first message is always the highest-priority violation.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from users_common.models.user import UserPayload

logger = logging.getLogger(__name__)

# Leading location segments added by the HTTP layer, not part of the payload.
_TRANSPORT_LOC = {"body", "query", "path", "header", "cookie"}


def _field_label(loc: Sequence[Any]) -> str:
    if loc and loc[0] in _TRANSPORT_LOC:
        loc = loc[1:]
    return ".".join(str(part) for part in loc) or "value"


def describe_error(error: Mapping[str, Any]) -> str:
    """Render a single pydantic error dict as a message."""
    label = _field_label(error.get("loc", ()))
    error_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    if error_type == "missing":
        return f'"{label}" is required'
    if error_type == "extra_forbidden":
        return f'"{label}" is not allowed'
    if error_type in {"model_type", "model_attributes_type", "dict_type"}:
        return f'"{label}" must be of type object'
    if error_type == "string_type":
        return f'"{label}" must be a string'
    if error_type == "string_too_short":
        return f'"{label}" is not allowed to be empty'
    if error_type in {"int_type", "int_parsing", "int_from_float"}:
        if isinstance(error.get("input"), float):
            return f'"{label}" must be an integer'
        return f'"{label}" must be a number'
    if error_type == "greater_than_equal":
        return f'"{label}" must be greater than or equal to {ctx.get("ge")}'
    if error_type == "less_than_equal":
        return f'"{label}" must be less than or equal to {ctx.get("le")}'
    if error_type == "json_invalid":
        return f"Invalid JSON body: {ctx.get('error', 'JSON decode error')}"
    return f'"{label}" {error.get("msg", "is invalid")}'


def first_violation(errors: Iterable[Mapping[str, Any]]) -> str:
    """Return the message of the highest-priority error."""
    for error in errors:
        return describe_error(error)
    return '"value" is invalid'


def validate(payload: Any) -> list[str]:
    """Check a decoded JSON body against the user schema.

    Args:
        payload: Decoded request body

    Returns:
        Violation messages in priority order, empty when the payload is valid
    """
    try:
        UserPayload.model_validate(payload)
    except ValidationError as e:
        messages = [describe_error(error) for error in e.errors()]
        logger.debug("User payload rejected: %s", messages)
        return messages
    return []
