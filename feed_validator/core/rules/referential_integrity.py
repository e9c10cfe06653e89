"""
Key-based rules: duplicated primary keys and dangling foreign keys.
"""

from collections.abc import Callable, Hashable

from feed_validator.core.models import Entity, FeedGraph, Frequency, StopTime, Trip
from feed_validator.core.notices import DuplicatedEntityNotice, ForeignKeyViolationNotice, Notice

from .base_rule import BaseRule


def _find_duplicates(
    entities: list[Entity],
    key: Callable[[Entity], tuple[Hashable, ...]],
    key_fields: str,
) -> list[Notice]:
    notices: list[Notice] = []
    seen: set[tuple[Hashable, ...]] = set()
    for entity in entities:
        value = key(entity)
        # Placeholder keys were already reported as missing values
        if any(part is None for part in value):
            continue
        if value in seen:
            notices.append(
                DuplicatedEntityNotice(
                    filename=entity.FILENAME,
                    entity_id=entity.entity_id,
                    key_fields=key_fields,
                )
            )
        seen.add(value)
    return notices


class DuplicateKeyRule(BaseRule):
    """
    Reports every entity whose primary key was already used in its file.

    The first occurrence is kept as the reference and is not reported.
    """

    def check(self, graph: FeedGraph) -> list[Notice]:
        return [
            *_find_duplicates(graph.trips, lambda t: (t.trip_id,), "trip_id"),
            *_find_duplicates(
                graph.stop_times, lambda st: (st.trip_id, st.stop_sequence), "trip_id,stop_sequence"
            ),
            *_find_duplicates(
                graph.frequencies, lambda f: (f.trip_id, f.start_time), "trip_id,start_time"
            ),
        ]

    @property
    def rule_name(self) -> str:
        return "duplicate_key"


class ForeignKeyRule(BaseRule):
    """Reports trip_id references that do not match any trip."""

    def check(self, graph: FeedGraph) -> list[Notice]:
        trip_ids = graph.trip_ids()
        notices: list[Notice] = []

        referencing: list[StopTime | Frequency] = [*graph.stop_times, *graph.frequencies]
        for entity in referencing:
            if entity.trip_id is None or entity.trip_id in trip_ids:
                continue
            notices.append(
                ForeignKeyViolationNotice(
                    filename=entity.FILENAME,
                    entity_id=entity.entity_id,
                    field_name="trip_id",
                    key_value=entity.trip_id,
                    referenced_filename=Trip.FILENAME,
                )
            )
        return notices

    @property
    def rule_name(self) -> str:
        return "foreign_key"
