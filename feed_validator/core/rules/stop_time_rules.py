"""
Rules over stop_times.txt, alone and against trips.txt.
"""

from collections import Counter

from feed_validator.core.models import FeedGraph, StopTime, Trip
from feed_validator.core.notices import (
    Notice,
    StopTimeArrivalAfterDepartureNotice,
    UnusableTripNotice,
)
from feed_validator.utils.time_utils import format_time_of_day

from .base_rule import BaseRule


class StopTimeArrivalAfterDepartureRule(BaseRule):
    """A vehicle cannot leave a stop before it arrives there."""

    def check(self, graph: FeedGraph) -> list[Notice]:
        notices: list[Notice] = []
        for stop_time in graph.stop_times:
            if stop_time.arrival_time is None or stop_time.departure_time is None:
                continue
            if stop_time.arrival_time > stop_time.departure_time:
                notices.append(
                    StopTimeArrivalAfterDepartureNotice(
                        filename=StopTime.FILENAME,
                        entity_id=stop_time.entity_id,
                        arrival_time=format_time_of_day(stop_time.arrival_time),
                        departure_time=format_time_of_day(stop_time.departure_time),
                    )
                )
        return notices

    @property
    def rule_name(self) -> str:
        return "stop_time_arrival_after_departure"


class UnusableTripRule(BaseRule):
    """
    Flags trips served by too few stop times to be usable by riders.

    Parameters:
    - min_stop_times: Minimum number of stop times per trip (default: 2)
    """

    def __init__(self, parameters=None):
        super().__init__(parameters)
        self.min_stop_times = int(self.parameters.get("min_stop_times", 2))
        if self.min_stop_times < 1:
            raise ValueError("UnusableTripRule requires min_stop_times >= 1")

    def check(self, graph: FeedGraph) -> list[Notice]:
        stop_time_counts = Counter(
            st.trip_id for st in graph.stop_times if st.trip_id is not None
        )

        notices: list[Notice] = []
        for trip in graph.trips:
            if trip.trip_id is None:
                continue
            count = stop_time_counts.get(trip.trip_id, 0)
            if count < self.min_stop_times:
                notices.append(
                    UnusableTripNotice(
                        filename=Trip.FILENAME,
                        entity_id=trip.trip_id,
                        stop_time_count=count,
                        min_stop_times=self.min_stop_times,
                    )
                )
        return notices

    @property
    def rule_name(self) -> str:
        return "unusable_trip"
