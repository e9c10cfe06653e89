"""
Rules over frequencies.txt periods.
"""

from collections import defaultdict
from itertools import combinations

from feed_validator.core.models import FeedGraph, Frequency
from feed_validator.core.notices import (
    FrequencyStartAfterEndNotice,
    FrequencyStartEqualsEndNotice,
    Notice,
    OverlappingFrequencyNotice,
)
from feed_validator.utils.time_utils import format_time_of_day, intervals_overlap

from .base_rule import BaseRule


def _has_period(frequency: Frequency) -> bool:
    return (
        frequency.trip_id is not None
        and frequency.start_time is not None
        and frequency.end_time is not None
    )


class FrequencyTimeRangeRule(BaseRule):
    """Checks that each frequency period starts before it ends."""

    def check(self, graph: FeedGraph) -> list[Notice]:
        notices: list[Notice] = []
        for frequency in graph.frequencies:
            if not _has_period(frequency):
                continue

            if frequency.start_time > frequency.end_time:
                notices.append(
                    FrequencyStartAfterEndNotice(
                        filename=Frequency.FILENAME,
                        entity_id=frequency.entity_id,
                        trip_id=frequency.trip_id,
                        start_time=format_time_of_day(frequency.start_time),
                        end_time=format_time_of_day(frequency.end_time),
                    )
                )
            elif frequency.start_time == frequency.end_time:
                notices.append(
                    FrequencyStartEqualsEndNotice(
                        filename=Frequency.FILENAME,
                        entity_id=frequency.entity_id,
                        trip_id=frequency.trip_id,
                        start_time=format_time_of_day(frequency.start_time),
                    )
                )
        return notices

    @property
    def rule_name(self) -> str:
        return "frequency_time_range"


class OverlappingFrequencyRule(BaseRule):
    """
    Reports pairs of periods of the same trip that share an instant.

    end_time is exclusive, so a period [start, end) is compared as the closed
    interval [start, end - 1] and back-to-back periods do not overlap.
    Periods that do not start before they end are left to
    FrequencyTimeRangeRule.
    """

    def check(self, graph: FeedGraph) -> list[Notice]:
        periods_by_trip: dict[str, list[Frequency]] = defaultdict(list)
        for frequency in graph.frequencies:
            if _has_period(frequency) and frequency.start_time < frequency.end_time:
                periods_by_trip[frequency.trip_id].append(frequency)

        notices: list[Notice] = []
        for trip_id, periods in periods_by_trip.items():
            periods.sort(key=lambda f: (f.start_time, f.end_time))
            for first, second in combinations(periods, 2):
                if not intervals_overlap(
                    first.start_time, first.end_time - 1, second.start_time, second.end_time - 1
                ):
                    continue
                notices.append(
                    OverlappingFrequencyNotice(
                        filename=Frequency.FILENAME,
                        entity_id=second.entity_id,
                        trip_id=trip_id,
                        first_start_time=format_time_of_day(first.start_time),
                        first_end_time=format_time_of_day(first.end_time),
                        second_start_time=format_time_of_day(second.start_time),
                        second_end_time=format_time_of_day(second.end_time),
                    )
                )
        return notices

    @property
    def rule_name(self) -> str:
        return "overlapping_frequency"
