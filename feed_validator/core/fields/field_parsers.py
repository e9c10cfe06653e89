"""
Scalar parsers for raw feed values.

Each parser takes the raw string (None when absent) and returns the typed
value or None. Structural failures raise FieldParseError, which builders
convert into notices.
"""

import math
import re

from feed_validator.utils.time_utils import MalformedTimeError, parse_time_of_day

# int() and float() also accept underscores, unicode digits, "nan" and "inf"
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class FieldParseError(ValueError):
    """Raised when a raw value cannot be converted to the field's type."""

    def __init__(self, field_name: str, raw_value: str, expected_type: str):
        self.field_name = field_name
        self.raw_value = raw_value
        self.expected_type = expected_type
        super().__init__(f"{field_name}: cannot parse {raw_value!r} as {expected_type}")


def parse_text(field_name: str, raw_value: str | None) -> str | None:
    if raw_value is None:
        return None
    value = raw_value.strip()
    return value or None


def parse_integer(field_name: str, raw_value: str | None) -> int | None:
    """
    Parse a base-10 integer.

    Raises:
        FieldParseError: If the value is present but not an integer
    """
    value = parse_text(field_name, raw_value)
    if value is None:
        return None
    if not _INTEGER_PATTERN.fullmatch(value):
        raise FieldParseError(field_name, raw_value, "integer")
    return int(value)


def parse_float(field_name: str, raw_value: str | None) -> float | None:
    """
    Parse a finite decimal number.

    Raises:
        FieldParseError: If the value is present but not a finite float
    """
    value = parse_text(field_name, raw_value)
    if value is None:
        return None
    if not _FLOAT_PATTERN.fullmatch(value):
        raise FieldParseError(field_name, raw_value, "float")

    result = float(value)
    # Exponents beyond the double range overflow to inf
    if not math.isfinite(result):
        raise FieldParseError(field_name, raw_value, "float")
    return result


def parse_time(field_name: str, raw_value: str | None) -> int | None:
    """
    Parse a feed time into an offset from noon.

    Raises:
        MalformedTimeError: If the value is present but not H:MM:SS
    """
    value = parse_text(field_name, raw_value)
    if value is None:
        return None
    return parse_time_of_day(value)


__all__ = [
    "FieldParseError",
    "MalformedTimeError",
    "parse_text",
    "parse_integer",
    "parse_float",
    "parse_time",
]
