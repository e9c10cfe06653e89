"""
Notices raised by entity builders for field-level violations.
"""

from typing import ClassVar

from .base_notice import ErrorNotice


class MissingRequiredValueNotice(ErrorNotice):
    code: ClassVar[str] = "E_015"
    title: ClassVar[str] = "Missing required value"
    detail_template: ClassVar[str] = (
        "Missing value for field:{field_name} marked as required in entity with id:{entity_id}"
    )

    field_name: str


class CannotParseIntegerNotice(ErrorNotice):
    code: ClassVar[str] = "E_005"
    title: ClassVar[str] = "Invalid integer value"
    detail_template: ClassVar[str] = (
        "Value: '{raw_value}' of field: {field_name} with type integer can't be parsed "
        "in file: {filename} for entity with id: {entity_id}"
    )

    field_name: str
    raw_value: str


class CannotParseFloatNotice(ErrorNotice):
    code: ClassVar[str] = "E_006"
    title: ClassVar[str] = "Invalid float value"
    detail_template: ClassVar[str] = (
        "Value: '{raw_value}' of field: {field_name} with type float can't be parsed "
        "in file: {filename} for entity with id: {entity_id}"
    )

    field_name: str
    raw_value: str


class IntegerFieldValueOutOfRangeNotice(ErrorNotice):
    code: ClassVar[str] = "E_010"
    title: ClassVar[str] = "Out of range integer value"
    detail_template: ClassVar[str] = (
        "Invalid value for field:{field_name} in entity with id:{entity_id}. "
        "Expected range: [{range_min}, {range_max}], actual value: {actual_value}"
    )

    field_name: str
    range_min: int | None = None
    range_max: int | None = None
    actual_value: int


class FloatFieldValueOutOfRangeNotice(ErrorNotice):
    code: ClassVar[str] = "E_011"
    title: ClassVar[str] = "Out of range float value"
    detail_template: ClassVar[str] = (
        "Invalid value for field:{field_name} in entity with id:{entity_id}. "
        "Expected range: [{range_min}, {range_max}], actual value: {actual_value}"
    )

    field_name: str
    range_min: float | None = None
    range_max: float | None = None
    actual_value: float


class InvalidTimeNotice(ErrorNotice):
    code: ClassVar[str] = "E_016"
    title: ClassVar[str] = "Invalid time"
    detail_template: ClassVar[str] = (
        "Value: '{raw_value}' of field: {field_name} is not a valid H:MM:SS time "
        "in file: {filename} for entity with id: {entity_id}"
    )

    field_name: str
    raw_value: str


class UnexpectedEnumValueNotice(ErrorNotice):
    code: ClassVar[str] = "E_021"
    title: ClassVar[str] = "Unexpected enum value"
    detail_template: ClassVar[str] = (
        "Invalid value :{enum_value} - for field:{field_name} in entity with id:{entity_id}. "
        "Expected one of: {expected_values}"
    )

    field_name: str
    enum_value: int
    expected_values: list[int]
