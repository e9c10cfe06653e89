"""
Core data models for the feed validator.

Raw input records, typed feed entities, the entity graph and the report.
All models use Pydantic for runtime validation and immutability.
"""

from .feed_graph import Entity, FeedGraph
from .frequency import Frequency
from .raw_record import RawFileInfo, RawRecord
from .stop_time import StopTime
from .trip import Trip
from .validation_report import ValidationReport

__all__ = [
    "RawFileInfo",
    "RawRecord",
    "Trip",
    "StopTime",
    "Frequency",
    "Entity",
    "FeedGraph",
    "ValidationReport",
]
