"""
TripBuilder - builds Trip entities from trips.txt rows.
"""

from feed_validator.core.fields import BikesAllowed, DirectionId, WheelchairAccessible
from feed_validator.core.models import Trip

from .base_builder import EntityBuilder, FieldKind, FieldSpec


class TripBuilder(EntityBuilder):
    ENTITY_TYPE = Trip
    FIELDS = (
        FieldSpec("route_id", required=True),
        FieldSpec("service_id", required=True),
        FieldSpec("trip_id", required=True),
        FieldSpec("trip_headsign"),
        FieldSpec("direction_id", FieldKind.ENUM, enum_type=DirectionId),
        FieldSpec("wheelchair_accessible", FieldKind.ENUM, enum_type=WheelchairAccessible),
        FieldSpec("bikes_allowed", FieldKind.ENUM, enum_type=BikesAllowed),
    )
