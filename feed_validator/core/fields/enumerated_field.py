"""
Enumerated field codec.

Maps the small integer code sets used by feed fields (pickup_type,
drop_off_type, bikes_allowed, ...) to closed enumerations.

Two outcomes exist beyond the variant set:
- absent code -> the enumeration's default variant
- present but unrecognized code -> INVALID
"""

from enum import IntEnum


class _InvalidCode:
    """Marker returned by decode() for codes outside the variant set."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "INVALID"

    def __bool__(self) -> bool:
        return False


INVALID = _InvalidCode()


class EnumeratedField(IntEnum):
    """
    Base class for closed integer code sets.

    Subclasses declare their variants and override default(). Decorate
    subclasses with enum.unique so duplicate codes fail at definition time.
    """

    @classmethod
    def default(cls) -> "EnumeratedField":
        """Variant used when the field is absent."""
        raise NotImplementedError(f"{cls.__name__} must define a default variant")

    @classmethod
    def decode(cls, code: int | None) -> "EnumeratedField | _InvalidCode":
        """
        Decode a raw integer code.

        Args:
            code: Integer code from the feed, or None when absent

        Returns:
            The matching variant, the default variant when code is None,
            or INVALID when the code is not part of the set
        """
        if code is None:
            return cls.default()
        try:
            return cls(code)
        except ValueError:
            return INVALID

    @classmethod
    def is_valid(cls, code: int | None) -> bool:
        """Return True when code is absent or part of the set."""
        if code is None:
            return True
        return code in cls._value2member_map_

    @classmethod
    def codes(cls) -> list[int]:
        return [member.value for member in cls]
