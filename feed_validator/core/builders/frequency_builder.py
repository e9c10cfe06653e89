"""
FrequencyBuilder - builds Frequency entities from frequencies.txt rows.
"""

from feed_validator.core.fields import ExactTimes
from feed_validator.core.models import Frequency

from .base_builder import EntityBuilder, FieldKind, FieldSpec


class FrequencyBuilder(EntityBuilder):
    ENTITY_TYPE = Frequency
    FIELDS = (
        FieldSpec("trip_id", required=True),
        FieldSpec("start_time", FieldKind.TIME, required=True),
        FieldSpec("end_time", FieldKind.TIME, required=True),
        FieldSpec("headway_secs", FieldKind.INTEGER, required=True, min_value=1),
        FieldSpec("exact_times", FieldKind.ENUM, enum_type=ExactTimes),
    )
