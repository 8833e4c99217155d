"""Parameter validation and input coercion helpers."""

from __future__ import annotations

import math
import numbers
from datetime import date
from typing import Any

from imperial_dating._calendar import to_timestamp
from imperial_dating._constants import (
    MAX_CHECK_NUMBER,
    MIN_CHECK_NUMBER,
    MS_PER_SECOND,
    SECONDS_TIMESTAMP_DIGITS,
    TIMESTAMP_UNITS,
)
from imperial_dating._errors import (
    ERR_MSG_CHECK_NUMBER,
    ERR_MSG_FLAG_NOT_BOOL,
    ERR_MSG_TIMESTAMP_UNIT,
    ERR_MSG_UNRECOGNIZED_INPUT,
    InvalidParameterError,
    MalformedInputError,
)


def validate_flag(name: str, value: Any) -> bool:
    """Reject anything but a real bool (no truthiness coercion)."""
    if not isinstance(value, bool):
        raise InvalidParameterError(
            ERR_MSG_FLAG_NOT_BOOL,
            f"{name} must be bool, got {type(value).__name__} {value!r}",
        )
    return value


def clamp_check_number(value: Any) -> int:
    """Clamp a numeric check number into a single digit.

    Fractional values are truncated after clamping.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(
            ERR_MSG_CHECK_NUMBER,
            f"check number must be a real number, got {type(value).__name__} {value!r}",
        )
    if isinstance(value, float) and math.isnan(value):
        raise InvalidParameterError(ERR_MSG_CHECK_NUMBER, "check number is NaN")
    if value > MAX_CHECK_NUMBER:
        return MAX_CHECK_NUMBER
    if value < MIN_CHECK_NUMBER:
        return MIN_CHECK_NUMBER
    return int(value)


def validate_timestamp_unit(unit: Any) -> str:
    if unit not in TIMESTAMP_UNITS:
        raise InvalidParameterError(
            ERR_MSG_TIMESTAMP_UNIT,
            f"timestamp unit {unit!r} is not one of {', '.join(TIMESTAMP_UNITS)}",
        )
    return unit


def _parse_number(text: str) -> numbers.Real:
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError as e:
        raise MalformedInputError(
            ERR_MSG_UNRECOGNIZED_INPUT,
            f"string {text!r} is not a number",
            wrapped=e,
        ) from e


def is_seconds_timestamp(number: numbers.Real) -> bool:
    """Ten integer digits means seconds since the epoch.

    Heuristic: seconds timestamps before 2001-09-09 or after 2286-11-20 have
    a different digit count and are read as milliseconds.
    """
    magnitude = abs(int(number))
    return 10 ** (SECONDS_TIMESTAMP_DIGITS - 1) <= magnitude < 10**SECONDS_TIMESTAMP_DIGITS


def coerce_timestamp(value: Any, unit: str = "auto") -> int:
    """Turn a date, datetime, number or numeric string into milliseconds."""
    unit = validate_timestamp_unit(unit)
    if isinstance(value, date):
        return to_timestamp(value)
    if isinstance(value, str):
        value = _parse_number(value)
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise MalformedInputError(
            ERR_MSG_UNRECOGNIZED_INPUT,
            f"cannot interpret {type(value).__name__} {value!r} as a date",
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise MalformedInputError(
            ERR_MSG_UNRECOGNIZED_INPUT,
            f"timestamp {value!r} is not finite",
        )
    if unit == "s" or (unit == "auto" and is_seconds_timestamp(value)):
        value = value * MS_PER_SECOND
    return math.floor(value)
