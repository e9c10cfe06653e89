"""
Time-of-day arithmetic for feed times.

Feed times are expressed as HH:MM:SS on the service day and may exceed
24:00:00 for trips running past midnight. Internally a time is an integer
offset in seconds from local noon of the service day, which keeps values
stable across daylight saving changes.
"""

import re

NOON_OFFSET_SECONDS = 12 * 3600
MIN_TIME_OFFSET = -NOON_OFFSET_SECONDS

_TIME_PATTERN = re.compile(r"([0-9]+):([0-5][0-9]):([0-5][0-9])")


class MalformedTimeError(ValueError):
    """Raised when a time string does not match H+:MM:SS."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Malformed time of day: {text!r} (expected H:MM:SS)")


def parse_time_of_day(text: str) -> int:
    """
    Convert an H:MM:SS string to an offset from noon of the service day.

    Args:
        text: Time string, hours may exceed 23

    Returns:
        Signed number of seconds elapsed since noon

    Raises:
        MalformedTimeError: If text is not structurally a feed time

    Examples:
        >>> parse_time_of_day("12:00:00")
        0
        >>> parse_time_of_day("25:30:00")
        48600
    """
    if not isinstance(text, str):
        raise MalformedTimeError(str(text))

    match = _TIME_PATTERN.fullmatch(text)
    if match is None:
        raise MalformedTimeError(text)

    hours, minutes, seconds = (int(part) for part in match.groups())
    return hours * 3600 + minutes * 60 + seconds - NOON_OFFSET_SECONDS


def format_time_of_day(offset: int) -> str:
    """
    Convert an offset from noon back to HH:MM:SS.

    Hours are not wrapped at 24, so offsets after the next midnight format
    as 24:00:00 and above.

    Raises:
        ValueError: If offset falls before midnight of the service day
    """
    if offset < MIN_TIME_OFFSET:
        raise ValueError(
            f"Offset {offset} is before midnight of the service day (minimum {MIN_TIME_OFFSET})"
        )

    total = offset + NOON_OFFSET_SECONDS
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def intervals_overlap(a_first: int, a_last: int, b_first: int, b_last: int) -> bool:
    """
    Check whether closed intervals [a_first, a_last] and [b_first, b_last] overlap.

    Touching endpoints count as overlapping and single-instant intervals are
    allowed.

    Raises:
        ValueError: If either interval ends before it starts
    """
    if a_first > a_last:
        raise ValueError(f"Invalid interval: first ({a_first}) > last ({a_last})")
    if b_first > b_last:
        raise ValueError(f"Invalid interval: first ({b_first}) > last ({b_last})")

    return a_first <= b_last and b_first <= a_last
