"""
FeedGraph: the in-memory store of built entities, one list per feed file.

Populated during the build phase and read by cross-entity rules once every
file has been built. Entities reference each other by identifier only.
"""

import threading
from collections import defaultdict
from collections.abc import Iterable
from typing import Union

from .frequency import Frequency
from .stop_time import StopTime
from .trip import Trip

Entity = Union[Trip, StopTime, Frequency]


class FeedGraph:
    """Entities of a feed grouped by the file they were built from."""

    def __init__(self, entities: Iterable[Entity] = ()):
        self._entities: dict[str, list[Entity]] = defaultdict(list)
        self._lock = threading.Lock()
        self.add_all(entities)

    def add(self, entity: Entity) -> None:
        with self._lock:
            self._entities[entity.FILENAME].append(entity)

    def add_all(self, entities: Iterable[Entity]) -> None:
        batch = list(entities)
        with self._lock:
            for entity in batch:
                self._entities[entity.FILENAME].append(entity)

    def entities(self, filename: str) -> list[Entity]:
        with self._lock:
            return list(self._entities.get(filename, ()))

    @property
    def trips(self) -> list[Trip]:
        return self.entities(Trip.FILENAME)

    @property
    def stop_times(self) -> list[StopTime]:
        return self.entities(StopTime.FILENAME)

    @property
    def frequencies(self) -> list[Frequency]:
        return self.entities(Frequency.FILENAME)

    def trip_ids(self) -> set[str]:
        """Identifiers of all trips that carry a trip_id."""
        return {trip.trip_id for trip in self.trips if trip.trip_id is not None}

    def entity_counts(self) -> dict[str, int]:
        with self._lock:
            return {filename: len(items) for filename, items in self._entities.items()}

    def __len__(self) -> int:
        with self._lock:
            return sum(len(items) for items in self._entities.values())
