"""
Entity builders.

Each builder turns one raw record of a feed file into a typed entity plus
the notices found while parsing its fields.
"""

from .base_builder import BuildResult, EntityBuilder, FieldKind, FieldSpec
from .frequency_builder import FrequencyBuilder
from .stop_time_builder import StopTimeBuilder
from .trip_builder import TripBuilder

BUILDER_REGISTRY: dict[str, type[EntityBuilder]] = {
    builder.ENTITY_TYPE.FILENAME: builder
    for builder in (TripBuilder, StopTimeBuilder, FrequencyBuilder)
}

__all__ = [
    "BuildResult",
    "EntityBuilder",
    "FieldKind",
    "FieldSpec",
    "TripBuilder",
    "StopTimeBuilder",
    "FrequencyBuilder",
    "BUILDER_REGISTRY",
]
