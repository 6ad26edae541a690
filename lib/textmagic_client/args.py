from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

from .errors import ArgumentError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_DIGITS_RE = re.compile(r"^\d+$")
_PHONE_RE = re.compile(r"^\+?\d+$")
_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def decamelize(key: str) -> str:
    return _CAMEL_RE.sub("_", key).lower()


def _wire_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (list, tuple)):
        return ",".join(_wire_value(item) for item in value)
    return str(value)


def convert_args(
        args: Mapping[str, Any],
        *,
        namespace: str | None = None,
        decamelize_keys: bool = False,
) -> dict[str, str]:
    """Flatten call arguments into the form/query mapping the API expects.

    ``id`` never travels in the body or query (it is part of the path) and
    ``None`` values are left out. Sequences are joined with commas, so
    ``phones=["+1555", "+1666"]`` becomes ``phones=+1555,+1666``.

    Update calls for the user and template resources wrap every key as
    ``namespace[snake_case_key]``; everything else keeps the camelCase keys.
    """
    wire: dict[str, str] = {}
    for key, value in args.items():
        if key == "id" or value is None:
            continue
        name = decamelize(key) if decamelize_keys else key
        if namespace:
            name = f"{namespace}[{name}]"
        wire[name] = _wire_value(value)
    return wire


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple)):
        return len(value) == 0
    return False


def require_fields(message: str, *values: Any) -> None:
    if any(is_blank(v) for v in values):
        raise ArgumentError(message)


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value >= 0
    return isinstance(value, str) and bool(_DIGITS_RE.match(value))


def require_numeric(value: Any, label: str) -> str:
    if not is_numeric(value):
        raise ArgumentError(f"{label} ID should be numeric")
    return str(value)


def require_pagination(page: Any, limit: Any) -> dict[str, Any]:
    if not is_numeric(page):
        raise ArgumentError("page should be numeric")
    if not is_numeric(limit):
        raise ArgumentError("limit should be numeric")
    return {"page": page, "limit": limit}


def require_phone(value: Any) -> str:
    text = str(value) if isinstance(value, int) and not isinstance(value, bool) else value
    if not isinstance(text, str) or not _PHONE_RE.match(text):
        raise ArgumentError("Specify a valid phone number")
    return text


def require_id_list(value: Any, message: str) -> list[str]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise ArgumentError(message)
    items = list(value)
    if not items or not all(is_numeric(item) for item in items):
        raise ArgumentError(message)
    return [str(item) for item in items]
