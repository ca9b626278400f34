"""JSONPath template resolution for action params.

A string param may embed ``{$.path}`` placeholders that refer into the job
context data. A param that is exactly one placeholder takes the resolved
value as-is; embedded placeholders are substituted as text.
"""

import json
import re
from typing import Any

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JSONPathError

TEMPLATE_PATTERN = re.compile(r"\{(\$[^{}]*)\}")


def resolve_jsonpath_templates(value: Any, data: Any) -> tuple[Any, list[str]]:
    """Resolve every placeholder in ``value`` against ``data``.

    Unresolvable placeholders become empty strings and are reported in the
    returned error list instead of raising.
    """
    errors: list[str] = []
    return _resolve(value, data, errors), errors


def _resolve(value: Any, data: Any, errors: list[str]) -> Any:
    if isinstance(value, dict):
        return {key: _resolve(item, data, errors) for key, item in value.items()}
    if isinstance(value, list):
        return [_resolve(item, data, errors) for item in value]
    if isinstance(value, str):
        return _resolve_string(value, data, errors)
    return value


def _resolve_string(value: str, data: Any, errors: list[str]) -> Any:
    exact = TEMPLATE_PATTERN.fullmatch(value)
    if exact:
        found, ok = _lookup(exact.group(1), data, errors)
        return found if ok else ""

    def substitute(match: re.Match[str]) -> str:
        found, ok = _lookup(match.group(1), data, errors)
        if not ok:
            return ""
        return found if isinstance(found, str) else json.dumps(found)

    return TEMPLATE_PATTERN.sub(substitute, value)


def _lookup(path: str, data: Any, errors: list[str]) -> tuple[Any, bool]:
    try:
        expression = parse_jsonpath(path)
    except JSONPathError as e:
        errors.append(f"Invalid JSONPath {path}: {e}")
        return None, False

    matches = expression.find(data)
    if not matches:
        errors.append(f"No value found for {path}")
        return None, False
    return matches[0].value, True
