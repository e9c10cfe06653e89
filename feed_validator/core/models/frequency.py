"""
Frequency entity (frequencies.txt).
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from feed_validator.core.fields import ExactTimes
from feed_validator.utils.time_utils import format_time_of_day


class Frequency(BaseModel):
    """
    Headway-based service period of a trip.

    start_time and end_time are offsets from noon; end_time is the instant
    service changes to another headway, so it is not part of the period.
    """

    model_config = ConfigDict(frozen=True)

    FILENAME: ClassVar[str] = "frequencies.txt"

    trip_id: str | None
    start_time: int | None
    end_time: int | None
    headway_secs: int | None
    exact_times: ExactTimes = ExactTimes.FREQUENCY_BASED

    @property
    def entity_id(self) -> str:
        start = "" if self.start_time is None else format_time_of_day(self.start_time)
        return f"{self.trip_id or ''};{start}"
