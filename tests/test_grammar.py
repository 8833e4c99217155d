"""Imperial date parsing and formatting tests."""

import pytest

from imperial_dating import ImperialDate, MalformedImperialDateError, parse_imperial
from imperial_dating._grammar import normalize


class TestNormalize:
    def test_strips_spaces_and_periods(self):
        assert normalize("  5 001 000.M2 ") == "5001000M2"

    def test_compact_unchanged_except_period(self):
        assert normalize("5001000.M2") == "5001000M2"


class TestParseImperial:
    def test_spaced(self):
        assert parse_imperial("5 001 000.M2") == ImperialDate(5, 1, 0, 2)

    def test_compact(self):
        assert parse_imperial("5001000.M2") == ImperialDate(5, 1, 0, 2)

    def test_without_period(self):
        assert parse_imperial("0523999M41") == ImperialDate(0, 523, 999, 41)

    def test_extra_periods_ignored(self):
        assert parse_imperial("0.523.999.M41") == ImperialDate(0, 523, 999, 41)

    def test_multi_digit_millennium(self):
        assert parse_imperial("1 234 567.M123").millennium == 123

    def test_malformed_wraps_lark_error(self):
        with pytest.raises(MalformedImperialDateError) as exc_info:
            parse_imperial("12AB34.M5")
        assert exc_info.value.wrapped is not None
        assert "12AB34.M5" in exc_info.value.internal()
        assert str(exc_info.value) == "malformed imperial date"

    def test_non_ascii_digits_rejected(self):
        with pytest.raises(MalformedImperialDateError):
            parse_imperial("５001000.M2")

    def test_non_string(self):
        with pytest.raises(MalformedImperialDateError, match="malformed"):
            parse_imperial(None)


class TestImperialDate:
    def test_year_in_millennium(self):
        assert ImperialDate(0, 523, 999, 41).year == 40999

    def test_millennium_boundary_year(self):
        assert ImperialDate(0, 1, 0, 2).year == 2000

    def test_first_year_of_millennium(self):
        assert ImperialDate(0, 1, 1, 3).year == 2001

    def test_slice_index(self):
        assert ImperialDate(0, 1, 0, 2).slice_index == 0
        assert ImperialDate(0, 0, 0, 2).slice_index == 999
        assert ImperialDate(0, 501, 0, 2).slice_index == 500

    def test_format(self):
        date = ImperialDate(5, 1, 0, 2)
        assert date.format() == "5 001 000.M2"
        assert date.format(compact=True) == "5001000.M2"
        assert str(date) == "5 001 000.M2"

    @pytest.mark.parametrize(
        "fields",
        [(10, 1, 0, 2), (-1, 1, 0, 2), (0, 1500, 0, 2), (0, 1, 1000, 2), (0, -1, 0, 2), ("5", 1, 0, 2), (True, 1, 0, 2), (0, 1, 0, 2.0)],
    )
    def test_fields_validated(self, fields):
        with pytest.raises(MalformedImperialDateError, match="field out of range"):
            ImperialDate(*fields)

    def test_millennium_digit_limit(self):
        with pytest.raises(MalformedImperialDateError):
            ImperialDate(0, 1, 0, 10**4000)

    def test_frozen(self):
        date = ImperialDate(5, 1, 0, 2)
        with pytest.raises(AttributeError):
            date.millennium = 3
