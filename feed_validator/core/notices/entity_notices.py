"""
Notices raised by cross-entity validation rules.
"""

from typing import ClassVar

from .base_notice import ErrorNotice, WarningNotice


class DuplicatedEntityNotice(ErrorNotice):
    code: ClassVar[str] = "E_030"
    title: ClassVar[str] = "Duplicated entity"
    detail_template: ClassVar[str] = (
        "Entity with id:{entity_id} is duplicated in file:{filename} on key:{key_fields}"
    )

    key_fields: str


class ForeignKeyViolationNotice(ErrorNotice):
    code: ClassVar[str] = "E_031"
    title: ClassVar[str] = "Foreign key violation"
    detail_template: ClassVar[str] = (
        "Value:{key_value} of field:{field_name} in entity with id:{entity_id} "
        "does not exist in file:{referenced_filename}"
    )

    field_name: str
    key_value: str
    referenced_filename: str


class StopTimeArrivalAfterDepartureNotice(ErrorNotice):
    code: ClassVar[str] = "E_046"
    title: ClassVar[str] = "Arrival time after departure time"
    detail_template: ClassVar[str] = (
        "In entity with id:{entity_id}, arrival_time:{arrival_time} is after "
        "departure_time:{departure_time}"
    )

    arrival_time: str
    departure_time: str


class FrequencyStartAfterEndNotice(ErrorNotice):
    code: ClassVar[str] = "E_048"
    title: ClassVar[str] = "Frequency start time after end time"
    detail_template: ClassVar[str] = (
        "Frequency for trip_id:{trip_id} has start_time:{start_time} after end_time:{end_time}"
    )

    trip_id: str
    start_time: str
    end_time: str


class OverlappingFrequencyNotice(ErrorNotice):
    code: ClassVar[str] = "E_053"
    title: ClassVar[str] = "Overlapping frequency periods"
    detail_template: ClassVar[str] = (
        "Period [{first_start_time}, {first_end_time}] overlaps with period "
        "[{second_start_time}, {second_end_time}] for trip_id:{trip_id}"
    )

    trip_id: str
    first_start_time: str
    first_end_time: str
    second_start_time: str
    second_end_time: str


class FrequencyStartEqualsEndNotice(WarningNotice):
    code: ClassVar[str] = "W_009"
    title: ClassVar[str] = "Frequency start time equals end time"
    detail_template: ClassVar[str] = (
        "Frequency for trip_id:{trip_id} has the same start_time and end_time:{start_time}"
    )

    trip_id: str
    start_time: str


class UnusableTripNotice(WarningNotice):
    code: ClassVar[str] = "W_014"
    title: ClassVar[str] = "Unusable trip"
    detail_template: ClassVar[str] = (
        "Trip with id:{entity_id} is referenced by {stop_time_count} stop time(s), "
        "at least {min_stop_times} are required"
    )

    stop_time_count: int
    min_stop_times: int = 2
