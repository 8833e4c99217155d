"""Calendar and format constants for Imperial Dating conversion."""

MS_PER_SECOND = 1000
MS_PER_HOUR = 3_600_000
MS_PER_DAY = 86_400_000

SIDEREAL_YEAR_MS = (((365 * 24 + 6) * 60 + 9) * 60 + 9) * MS_PER_SECOND + 760
"""Sidereal year length, 365d 6h 9m 9.76s, in whole milliseconds."""

SLICES_PER_YEAR = 1000
"""The year fraction is expressed in per-mille slices."""

YEARS_PER_MILLENNIUM = 1000

MAX_CHECK_NUMBER = 9
MIN_CHECK_NUMBER = 0

SECONDS_TIMESTAMP_DIGITS = 10
"""Numeric timestamps with this many integer digits are read as seconds."""

TIMESTAMP_UNITS = ("auto", "s", "ms")

MAX_MILLENNIUM_DIGITS = 4000
"""Longest millennium accepted or produced; keeps int/str conversion in bounds."""

MILLENNIUM_LIMIT = 10**MAX_MILLENNIUM_DIGITS
