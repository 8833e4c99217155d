"""imperial-dating - Convert between calendar timestamps and Imperial dates."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime
from importlib.metadata import PackageNotFoundError, version
from typing import Any

try:
    __version__ = version("imperial-dating")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from imperial_dating._calendar import YearModel, is_leap_year
from imperial_dating._converter import convert_to_imperial, convert_to_modern
from imperial_dating._errors import (
    ConversionError,
    DateOutOfRangeError,
    InvalidParameterError,
    MalformedImperialDateError,
    MalformedInputError,
)
from imperial_dating._grammar import parse_imperial
from imperial_dating._result import ConversionResult
from imperial_dating._utils import validate_flag
from imperial_dating.imperial_date import ImperialDate

__all__ = [
    "to_imperial",
    "to_modern",
    "imperial_now",
    "parse_imperial",
    "is_leap_year",
    "ConversionResult",
    "ImperialDate",
    "YearModel",
    "ConversionError",
    "DateOutOfRangeError",
    "InvalidParameterError",
    "MalformedImperialDateError",
    "MalformedInputError",
]

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def _failure(operation: str, err: ConversionError) -> ConversionResult[Any]:
    logger.debug("%s failed: %s", operation, err.internal())
    return ConversionResult.failure(err)


def to_imperial(
    value: datetime | date | int | float | str,
    check_number: int | float = 0,
    use_simple_year: bool = True,
    compact: bool = False,
    *,
    timestamp_unit: str = "auto",
) -> ConversionResult[str]:
    """Convert a date or timestamp to an Imperial date string.

    Args:
        value: A date, datetime, or numeric timestamp (number or numeric
            string). Naive datetimes are read as UTC.
        check_number: Leading digit; clamped to 0..9.
        use_simple_year: Use the Gregorian year length. If False, use the
            sidereal year and correct for its drift since year 0.
        compact: Omit the spaces between the fields.
        timestamp_unit: ``"ms"``, ``"s"``, or ``"auto"`` (the default), which
            reads numbers with exactly ten integer digits as seconds.

    Returns:
        A result holding a string like ``"5 001 000.M2"``, or the error.
        Errors are MalformedInputError for an uninterpretable ``value``,
        InvalidParameterError for bad parameters, and DateOutOfRangeError for a
        timestamp whose millennium has too many digits to print.
    """
    try:
        imperial = convert_to_imperial(value, check_number, use_simple_year, timestamp_unit)
        compact = validate_flag("compact", compact)
    except ConversionError as e:
        return _failure("to_imperial", e)
    return ConversionResult.success(imperial.format(compact))


def to_modern(
    imperial: str | ImperialDate,
    return_as_timestamp: bool = True,
    source_is_sidereal: bool = False,
) -> ConversionResult[int | datetime]:
    """Convert an Imperial date string to a timestamp or datetime.

    Spaces and periods are ignored, so compact and spaced forms convert
    identically. The result is the start of the per-mille slice of the year
    that the date names.

    Args:
        imperial: An Imperial date string, or a parsed ImperialDate.
        return_as_timestamp: Return integer milliseconds since the Unix epoch
            if True, else an aware UTC datetime.
        source_is_sidereal: The year fraction was computed on sidereal years.

    Returns:
        A result holding the timestamp or datetime, or the error.
        Errors are MalformedImperialDateError for a malformed string,
        InvalidParameterError for non-bool flags, and DateOutOfRangeError when
        a datetime is requested for a year outside 1..9999.
    """
    try:
        modern = convert_to_modern(imperial, return_as_timestamp, source_is_sidereal)
    except ConversionError as e:
        return _failure("to_modern", e)
    return ConversionResult.success(modern)


def imperial_now(
    clock: Callable[[], datetime | date | int | float],
    check_number: int | float = 0,
    use_simple_year: bool = True,
    compact: bool = False,
    *,
    timestamp_unit: str = "auto",
) -> ConversionResult[str]:
    """Convert the time reported by ``clock`` to an Imperial date string.

    The clock is supplied by the caller (e.g. ``lambda: datetime.now(timezone.utc)``
    or ``time.time`` with ``timestamp_unit="s"``); nothing here reads the
    system clock.
    """
    if not callable(clock):
        return _failure(
            "imperial_now",
            InvalidParameterError(
                "clock must be callable",
                f"clock must be callable, got {type(clock).__name__}",
            ),
        )
    return to_imperial(
        clock(), check_number, use_simple_year, compact, timestamp_unit=timestamp_unit
    )
