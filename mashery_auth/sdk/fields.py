"""
Request field parsing for the credentials path.
"""

import logging
import re
from typing import Dict, Any, Mapping

from mashery_auth.domain.errors import InvalidFieldError


logger = logging.getLogger(__name__)

STRING_FIELDS = ("area_id", "api_key", "secret", "username", "password")
INT_FIELDS = ("area_nid", "qps")
DURATION_FIELDS = ("lease_duration",)

_DURATION_PART = re.compile(r"(\d+)([hms])")
_DURATION_UNITS = {"h": 3600, "m": 60, "s": 1}


def parse_duration_seconds(value: Any) -> int:
    """
    Parse a duration given as seconds or as a "1h30m"-style string.

    Raises:
        InvalidFieldError: Unparseable or negative value
    """
    if isinstance(value, bool):
        raise InvalidFieldError(f"invalid duration: {value!r}")
    if isinstance(value, int):
        seconds = value
    elif isinstance(value, float) and value.is_integer():
        seconds = int(value)
    elif isinstance(value, str):
        text = value.strip()
        if re.fullmatch(r"\d+", text):
            seconds = int(text)
        elif text and _DURATION_PART.sub("", text) == "":
            seconds = sum(int(n) * _DURATION_UNITS[unit] for n, unit in _DURATION_PART.findall(text))
        else:
            raise InvalidFieldError(f"invalid duration: {value!r}")
    else:
        raise InvalidFieldError(f"invalid duration: {value!r}")

    if seconds < 0:
        raise InvalidFieldError(f"duration must not be negative: {value!r}")
    return seconds


def _parse_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidFieldError(f"field '{name}' must be an integer")
    try:
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(value)
            return int(value)
        return int(value)
    except (TypeError, ValueError):
        raise InvalidFieldError(f"field '{name}' must be an integer")


def parse_credential_fields(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Type-check raw request fields.

    Only supplied fields appear in the result, so it can drive both a
    create and a merge update. Unknown fields are ignored with a warning.

    Raises:
        InvalidFieldError: A field has the wrong type
    """
    parsed: Dict[str, Any] = {}

    for name, value in data.items():
        if value is None:
            continue
        if name in STRING_FIELDS:
            if not isinstance(value, str):
                raise InvalidFieldError(f"field '{name}' must be a string")
            parsed[name] = value
        elif name in INT_FIELDS:
            parsed[name] = _parse_int(name, value)
        elif name in DURATION_FIELDS:
            parsed[name] = parse_duration_seconds(value)
        else:
            logger.warning("Ignoring unknown field %r", name)

    return parsed
