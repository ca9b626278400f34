"""Parsing helpers for string-encoded action parameters."""

import json
from typing import Any

from caep.errors import ErrorCode, ValidationError


def parse_subject(subject: str) -> Any:
    """Decode the JSON subject identifier used for the sub_id claim."""
    try:
        return json.loads(subject)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid subject JSON: {e}", code=ErrorCode.INVALID_SUBJECT) from e


def parse_reason(reason: str | None) -> Any:
    """Return an i18n map when the reason is a JSON object, else the string as given."""
    if not reason:
        return reason

    try:
        parsed = json.loads(reason)
    except json.JSONDecodeError:
        return reason

    if isinstance(parsed, (dict, list)):
        return parsed
    return reason


def build_url(address: str, suffix: str | None = None) -> str:
    if not suffix:
        return address
    base_url = address[:-1] if address.endswith("/") else address
    clean_suffix = suffix[1:] if suffix.startswith("/") else suffix
    return f"{base_url}/{clean_suffix}"
