"""Forward and inverse Imperial Dating conversion.

Both directions work on integer millisecond timestamps so that slice
boundaries are exact and years beyond ``datetime.MAXYEAR`` convert.
The functions here raise :class:`ConversionError` subclasses; the public
wrappers in :mod:`imperial_dating` turn them into results.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from imperial_dating._calendar import (
    YearModel,
    from_timestamp,
    sidereal_drift_ms,
    year_length_ms,
    year_of,
    year_start_ms,
)
from imperial_dating._constants import MILLENNIUM_LIMIT, SLICES_PER_YEAR, YEARS_PER_MILLENNIUM
from imperial_dating._errors import ERR_MSG_MILLENNIUM_TOO_LARGE, DateOutOfRangeError
from imperial_dating._grammar import parse_imperial
from imperial_dating._utils import clamp_check_number, coerce_timestamp, validate_flag
from imperial_dating.imperial_date import ImperialDate


def imperial_from_timestamp(
    timestamp_ms: int,
    check_number: int = 0,
    model: YearModel = YearModel.SIMPLE,
) -> ImperialDate:
    """Decompose a timestamp into Imperial date fields."""
    if model is YearModel.SIDEREAL:
        timestamp_ms += sidereal_drift_ms(year_of(timestamp_ms))

    year = year_of(timestamp_ms)
    millennium = year // YEARS_PER_MILLENNIUM
    if year % YEARS_PER_MILLENNIUM != 0:
        millennium += 1
    if abs(millennium) >= MILLENNIUM_LIMIT:
        raise DateOutOfRangeError(
            ERR_MSG_MILLENNIUM_TOO_LARGE,
            "timestamp is too far from the epoch to format its millennium",
        )

    elapsed_ms = timestamp_ms - year_start_ms(year)
    slice_index = elapsed_ms * SLICES_PER_YEAR // year_length_ms(year, model)

    return ImperialDate(
        check_number=check_number,
        year_fraction=(slice_index + 1) % SLICES_PER_YEAR,
        year_of_millennium=year % YEARS_PER_MILLENNIUM,
        millennium=millennium,
    )


def timestamp_from_imperial(
    imperial: ImperialDate,
    model: YearModel = YearModel.SIMPLE,
) -> int:
    """Start of the per-mille slice an Imperial date names, in milliseconds."""
    year = imperial.year
    # ceiling division keeps the result inside the slice, not before it
    elapsed_ms = -(-imperial.slice_index * year_length_ms(year, model) // SLICES_PER_YEAR)
    adjusted_ms = year_start_ms(year) + elapsed_ms
    if model is not YearModel.SIDEREAL:
        return adjusted_ms

    # The forward shift uses the drift of the unshifted calendar year, which
    # differs from the parsed year early in the year.
    timestamp_ms = adjusted_ms - sidereal_drift_ms(year)
    calendar_year = year_of(timestamp_ms)
    if calendar_year != year:
        timestamp_ms = adjusted_ms - sidereal_drift_ms(calendar_year)
    return timestamp_ms


def convert_to_imperial(
    value: Any,
    check_number: Any = 0,
    use_simple_year: Any = True,
    timestamp_unit: str = "auto",
) -> ImperialDate:
    timestamp_ms = coerce_timestamp(value, timestamp_unit)
    check = clamp_check_number(check_number)
    model = YearModel.from_flag(validate_flag("use_simple_year", use_simple_year))
    return imperial_from_timestamp(timestamp_ms, check, model)


def convert_to_modern(
    imperial: str | ImperialDate,
    return_as_timestamp: Any = True,
    source_is_sidereal: Any = False,
) -> int | datetime:
    as_timestamp = validate_flag("return_as_timestamp", return_as_timestamp)
    sidereal = validate_flag("source_is_sidereal", source_is_sidereal)
    if not isinstance(imperial, ImperialDate):
        imperial = parse_imperial(imperial)
    model = YearModel.SIDEREAL if sidereal else YearModel.SIMPLE
    timestamp_ms = timestamp_from_imperial(imperial, model)
    return timestamp_ms if as_timestamp else from_timestamp(timestamp_ms)
