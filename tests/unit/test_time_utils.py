"""
Unit tests for time-of-day arithmetic.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from feed_validator.utils.time_utils import (
    MIN_TIME_OFFSET,
    MalformedTimeError,
    format_time_of_day,
    intervals_overlap,
    parse_time_of_day,
)


class TestParseTimeOfDay:
    """Tests for parse_time_of_day"""

    @pytest.mark.parametrize("text, expected", [
        ("12:00:00", 0),
        ("00:00:00", -43200),
        ("13:30:15", 5415),
        ("08:00:00", -14400),
        ("24:00:00", 43200),
        ("25:30:00", 48600),
        ("5:07:09", -24771),
    ])
    def test_valid_times(self, text, expected):
        assert parse_time_of_day(text) == expected

    @pytest.mark.parametrize("text", [
        "bad",
        "25:99:00",
        "12:00",
        "12:00:00:00",
        "12:0a:00",
        "12:00:60",
        "-1:00:00",
        "",
        " 12:00:00",
        "12:00:00\n",
    ])
    def test_malformed_times_raise(self, text):
        with pytest.raises(MalformedTimeError) as exc_info:
            parse_time_of_day(text)
        assert exc_info.value.text == text

    def test_malformed_time_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_time_of_day("noon")


class TestFormatTimeOfDay:
    """Tests for format_time_of_day"""

    @pytest.mark.parametrize("offset, expected", [
        (0, "12:00:00"),
        (-43200, "00:00:00"),
        (5415, "13:30:15"),
        (43200, "24:00:00"),
        (48600, "25:30:00"),
        (100000, "39:46:40"),
    ])
    def test_format(self, offset, expected):
        assert format_time_of_day(offset) == expected

    def test_offset_before_midnight_raises(self):
        with pytest.raises(ValueError):
            format_time_of_day(MIN_TIME_OFFSET - 1)

    @given(st.integers(min_value=MIN_TIME_OFFSET, max_value=10 * 86400))
    def test_property_round_trip(self, offset):
        """Property test: parsing a formatted offset gives the offset back"""
        assert parse_time_of_day(format_time_of_day(offset)) == offset


class TestIntervalsOverlap:
    """Tests for intervals_overlap"""

    def test_touching_endpoints_overlap(self):
        assert intervals_overlap(0, 100, 100, 200) is True

    def test_adjacent_intervals_do_not_overlap(self):
        assert intervals_overlap(0, 99, 100, 200) is False

    def test_containment(self):
        assert intervals_overlap(0, 1000, 100, 200) is True
        assert intervals_overlap(100, 200, 0, 1000) is True

    def test_partial_overlap(self):
        assert intervals_overlap(0, 150, 100, 200) is True

    def test_degenerate_interval(self):
        assert intervals_overlap(50, 50, 0, 100) is True
        assert intervals_overlap(50, 50, 50, 50) is True
        assert intervals_overlap(50, 50, 51, 100) is False

    def test_negative_offsets(self):
        assert intervals_overlap(-3600, -1, -1, 3600) is True

    def test_reversed_interval_raises(self):
        with pytest.raises(ValueError):
            intervals_overlap(10, 0, 0, 10)
        with pytest.raises(ValueError):
            intervals_overlap(0, 10, 10, 0)

    @given(st.data())
    def test_property_symmetric(self, data):
        """Property test: overlap does not depend on argument order"""
        a_first = data.draw(st.integers(-50000, 150000))
        a_last = data.draw(st.integers(a_first, 150000))
        b_first = data.draw(st.integers(-50000, 150000))
        b_last = data.draw(st.integers(b_first, 150000))

        assert intervals_overlap(a_first, a_last, b_first, b_last) == \
            intervals_overlap(b_first, b_last, a_first, a_last)

    @given(st.data())
    def test_property_matches_shared_instant(self, data):
        """Property test: overlap iff the intervals share at least one instant"""
        a_first = data.draw(st.integers(-20, 20))
        a_last = data.draw(st.integers(a_first, 20))
        b_first = data.draw(st.integers(-20, 20))
        b_last = data.draw(st.integers(b_first, 20))

        shared = set(range(a_first, a_last + 1)) & set(range(b_first, b_last + 1))
        assert intervals_overlap(a_first, a_last, b_first, b_last) == bool(shared)
