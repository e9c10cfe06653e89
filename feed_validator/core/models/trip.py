"""
Trip entity (trips.txt).
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from feed_validator.core.fields import BikesAllowed, DirectionId, WheelchairAccessible


class Trip(BaseModel):
    """
    A trip of a route.

    Required fields hold None when the source row did not provide a usable
    value; the corresponding notice was emitted at build time.
    """

    model_config = ConfigDict(frozen=True)

    FILENAME: ClassVar[str] = "trips.txt"

    route_id: str | None
    service_id: str | None
    trip_id: str | None
    trip_headsign: str | None = None
    direction_id: DirectionId = DirectionId.OUTBOUND
    wheelchair_accessible: WheelchairAccessible = WheelchairAccessible.UNKNOWN
    bikes_allowed: BikesAllowed = BikesAllowed.UNKNOWN

    @property
    def entity_id(self) -> str:
        return self.trip_id or ""
