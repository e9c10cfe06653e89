"""
StopTimeBuilder - builds StopTime entities from stop_times.txt rows.
"""

from feed_validator.core.fields import DropOffType, PickupType, Timepoint
from feed_validator.core.models import StopTime

from .base_builder import EntityBuilder, FieldKind, FieldSpec


class StopTimeBuilder(EntityBuilder):
    """
    Builds a StopTime.

    arrival_time and departure_time are optional here; whether a stop time
    needs them depends on its position in the trip, which only rules can see.
    """

    ENTITY_TYPE = StopTime
    FIELDS = (
        FieldSpec("trip_id", required=True),
        FieldSpec("arrival_time", FieldKind.TIME),
        FieldSpec("departure_time", FieldKind.TIME),
        FieldSpec("stop_id", required=True),
        FieldSpec("stop_sequence", FieldKind.INTEGER, required=True, min_value=0),
        FieldSpec("stop_headsign"),
        FieldSpec("pickup_type", FieldKind.ENUM, enum_type=PickupType),
        FieldSpec("drop_off_type", FieldKind.ENUM, enum_type=DropOffType),
        FieldSpec("shape_dist_traveled", FieldKind.FLOAT, min_value=0.0),
        FieldSpec("timepoint", FieldKind.ENUM, enum_type=Timepoint),
    )
