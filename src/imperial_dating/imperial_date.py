"""Structured Imperial date value."""

from __future__ import annotations

from dataclasses import dataclass

from imperial_dating._constants import (
    MAX_CHECK_NUMBER,
    MILLENNIUM_LIMIT,
    MIN_CHECK_NUMBER,
    SLICES_PER_YEAR,
    YEARS_PER_MILLENNIUM,
)
from imperial_dating._errors import ERR_MSG_FIELD_RANGE, MalformedImperialDateError


@dataclass(frozen=True)
class ImperialDate:
    """The four fields of an Imperial date ``C YYY MMM.Mnn``."""

    check_number: int
    year_fraction: int
    year_of_millennium: int
    millennium: int

    def __post_init__(self) -> None:
        bounds = {
            "check_number": (MIN_CHECK_NUMBER, MAX_CHECK_NUMBER),
            "year_fraction": (0, SLICES_PER_YEAR - 1),
            "year_of_millennium": (0, YEARS_PER_MILLENNIUM - 1),
        }
        for name in (*bounds, "millennium"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise MalformedImperialDateError(
                    ERR_MSG_FIELD_RANGE,
                    f"{name} must be int, got {type(value).__name__}",
                )
        for name, (low, high) in bounds.items():
            if not low <= getattr(self, name) <= high:
                raise MalformedImperialDateError(
                    ERR_MSG_FIELD_RANGE,
                    f"{name} is outside {low}..{high}",
                )
        # str() of larger ints hits the interpreter's digit limit
        if abs(self.millennium) >= MILLENNIUM_LIMIT:
            raise MalformedImperialDateError(
                ERR_MSG_FIELD_RANGE,
                "millennium has too many digits",
            )

    @property
    def year(self) -> int:
        """Calendar year named by the millennium fields.

        A year-of-millennium of 000 is the last year of the named millennium.
        """
        millennium = self.millennium - 1
        if self.year_of_millennium == 0:
            millennium += 1
        return millennium * YEARS_PER_MILLENNIUM + self.year_of_millennium

    @property
    def slice_index(self) -> int:
        """Zero-based per-mille slice of the year (fraction 001 is slice 0)."""
        return (self.year_fraction - 1) % SLICES_PER_YEAR

    def format(self, compact: bool = False) -> str:
        sep = "" if compact else " "
        return (
            f"{self.check_number}{sep}{self.year_fraction:03d}{sep}"
            f"{self.year_of_millennium:03d}.M{self.millennium}"
        )

    def __str__(self) -> str:
        return self.format()
