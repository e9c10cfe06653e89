"""
StopTime entity (stop_times.txt).
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from feed_validator.core.fields import DropOffType, PickupType, Timepoint


class StopTime(BaseModel):
    """
    A vehicle's arrival at and departure from a stop on a trip.

    Attributes:
        trip_id: Trip identifier (foreign key to trips.txt)
        stop_id: Stop identifier
        stop_sequence: Order of the stop on the trip, >= 0
        arrival_time: Offset from noon of the service day, in seconds
        departure_time: Offset from noon of the service day, in seconds
        stop_headsign: Headsign override for this stop
        pickup_type: Pickup method
        drop_off_type: Drop off method
        timepoint: Whether the times are exact or approximate
        shape_dist_traveled: Distance travelled along the shape, >= 0
    """

    model_config = ConfigDict(frozen=True)

    FILENAME: ClassVar[str] = "stop_times.txt"

    trip_id: str | None
    stop_id: str | None
    stop_sequence: int | None
    arrival_time: int | None = None
    departure_time: int | None = None
    stop_headsign: str | None = None
    pickup_type: PickupType = PickupType.REGULAR_PICKUP
    drop_off_type: DropOffType = DropOffType.REGULAR_DROP_OFF
    timepoint: Timepoint = Timepoint.EXACT
    shape_dist_traveled: float | None = None

    @property
    def entity_id(self) -> str:
        sequence = "" if self.stop_sequence is None else str(self.stop_sequence)
        return f"{self.trip_id or ''};{sequence}"
