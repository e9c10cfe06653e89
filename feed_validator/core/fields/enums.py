"""
Concrete enumerated fields of the feed format.
"""

from enum import unique

from .enumerated_field import EnumeratedField


@unique
class DropOffType(EnumeratedField):
    """
    Indicates drop off method.

    0 or empty - Regularly scheduled drop off.
    1 - No drop off available.
    2 - Must phone agency to arrange drop off.
    3 - Must coordinate with driver to arrange drop off.
    """

    REGULAR_DROP_OFF = 0
    NO_DROP_OFF = 1
    MUST_PHONE_DROP_OFF = 2
    MUST_ASK_DRIVER_DROP_OFF = 3

    @classmethod
    def default(cls) -> "DropOffType":
        return cls.REGULAR_DROP_OFF


@unique
class PickupType(EnumeratedField):
    """
    Indicates pickup method. Same code set as DropOffType.
    """

    REGULAR_PICKUP = 0
    NO_PICKUP = 1
    MUST_PHONE_PICKUP = 2
    MUST_ASK_DRIVER_PICKUP = 3

    @classmethod
    def default(cls) -> "PickupType":
        return cls.REGULAR_PICKUP


@unique
class Timepoint(EnumeratedField):
    """Whether arrival/departure times are exact or approximate."""

    APPROXIMATE = 0
    EXACT = 1

    @classmethod
    def default(cls) -> "Timepoint":
        return cls.EXACT


@unique
class ExactTimes(EnumeratedField):
    """Frequency-based vs schedule-based service for a frequencies.txt row."""

    FREQUENCY_BASED = 0
    SCHEDULE_BASED = 1

    @classmethod
    def default(cls) -> "ExactTimes":
        return cls.FREQUENCY_BASED


@unique
class WheelchairAccessible(EnumeratedField):
    UNKNOWN = 0
    ACCESSIBLE = 1
    NOT_ACCESSIBLE = 2

    @classmethod
    def default(cls) -> "WheelchairAccessible":
        return cls.UNKNOWN


@unique
class BikesAllowed(EnumeratedField):
    UNKNOWN = 0
    ALLOWED = 1
    NOT_ALLOWED = 2

    @classmethod
    def default(cls) -> "BikesAllowed":
        return cls.UNKNOWN


@unique
class DirectionId(EnumeratedField):
    OUTBOUND = 0
    INBOUND = 1

    @classmethod
    def default(cls) -> "DirectionId":
        return cls.OUTBOUND
