"""
Field-level codecs and parsers.

Provides the enumerated field codec, the concrete feed enumerations and
scalar parsers used by entity builders.
"""

from .enumerated_field import INVALID, EnumeratedField
from .enums import (
    BikesAllowed,
    DirectionId,
    DropOffType,
    ExactTimes,
    PickupType,
    Timepoint,
    WheelchairAccessible,
)
from .field_parsers import (
    FieldParseError,
    MalformedTimeError,
    parse_float,
    parse_integer,
    parse_text,
    parse_time,
)

__all__ = [
    "INVALID",
    "EnumeratedField",
    "DropOffType",
    "PickupType",
    "Timepoint",
    "ExactTimes",
    "WheelchairAccessible",
    "BikesAllowed",
    "DirectionId",
    "FieldParseError",
    "MalformedTimeError",
    "parse_text",
    "parse_integer",
    "parse_float",
    "parse_time",
]
