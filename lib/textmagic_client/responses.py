from __future__ import annotations

import json
from typing import Any, Container

from .errors import ApiError, AuthError
from .transport import ResponseEnvelope

UNKNOWN_ERROR = "Unknown"

# send() is successful on any 2xx: 200 for an immediate session, 201 for
# schedules and recurring rules.
SUCCESS_2XX = range(200, 300)


def _decode(text: str) -> Any:
    return json.loads(text)


def _expected_codes(expected: int | Container[int]) -> Container[int]:
    if isinstance(expected, int):
        return (expected,)
    return expected


def interpret(envelope: ResponseEnvelope, expected: int | Container[int], *, boolean: bool = False) -> Any:
    """Turn a raw response into the decoded payload or raise ApiError.

    204 responses (and calls flagged ``boolean``) carry no body worth reading
    and resolve to ``True``.
    """
    status = envelope.status_code
    if status in _expected_codes(expected):
        if boolean or status == 204:
            return True
        try:
            return _decode(envelope.text)
        except ValueError as e:
            raise ApiError(status, UNKNOWN_ERROR, envelope.text[:1000] or None) from e

    message = UNKNOWN_ERROR
    details = envelope.text[:1000] or None
    try:
        data = _decode(envelope.text)
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        message = str(data["message"])

    if status in (401, 403):
        raise AuthError(status, message, details)
    raise ApiError(status, message, details)
