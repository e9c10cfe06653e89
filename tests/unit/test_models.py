"""
Unit tests for Pydantic data models.

Tests raw records, feed entities, the entity graph and the validation report.
"""

import json
import threading
from datetime import datetime

import pytest
from pydantic import ValidationError

from feed_validator.core.fields import PickupType
from feed_validator.core.models import (
    FeedGraph,
    Frequency,
    RawFileInfo,
    RawRecord,
    StopTime,
    Trip,
    ValidationReport,
)
from feed_validator.core.notices import MissingRequiredValueNotice, NoticeCollector, UnusableTripNotice


class TestRawRecord:
    """Tests for RawFileInfo and RawRecord models"""

    def test_valid_record(self, make_record):
        record = make_record("trips.txt", row_number=3, trip_id="t1", route_id="r1")

        assert record.filename == "trips.txt"
        assert record.row_number == 3
        assert record.get("trip_id") == "t1"

    def test_empty_and_absent_values(self, make_record):
        record = make_record("trips.txt", trip_id="", route_id=None)

        assert record.get("trip_id") is None
        assert record.get("route_id") is None
        assert record.get("not_in_file") is None

    def test_empty_filename(self):
        """Test that empty filename raises ValidationError"""
        with pytest.raises(ValidationError) as exc_info:
            RawFileInfo(filename="")
        assert "filename" in str(exc_info.value)

    def test_record_is_immutable(self, make_record):
        record = make_record("trips.txt", trip_id="t1")
        with pytest.raises(ValidationError):
            record.row_number = 5


class TestEntities:
    """Tests for Trip, StopTime and Frequency models"""

    def test_trip_defaults(self):
        trip = Trip(route_id="r1", service_id="wk", trip_id="t1")

        assert trip.entity_id == "t1"
        assert trip.direction_id == 0
        assert trip.wheelchair_accessible == 0
        assert trip.bikes_allowed == 0

    def test_stop_time_entity_id(self):
        assert StopTime(trip_id="t1", stop_id="s1", stop_sequence=4).entity_id == "t1;4"
        assert StopTime(trip_id=None, stop_id="s1", stop_sequence=None).entity_id == ";"

    def test_stop_time_defaults(self):
        stop_time = StopTime(trip_id="t1", stop_id="s1", stop_sequence=1)
        assert stop_time.pickup_type is PickupType.REGULAR_PICKUP
        assert stop_time.timepoint == 1

    def test_frequency_entity_id_formats_start_time(self):
        frequency = Frequency(trip_id="t1", start_time=-21600, end_time=-10800, headway_secs=600)
        assert frequency.entity_id == "t1;06:00:00"

    def test_entities_are_immutable(self):
        trip = Trip(route_id="r1", service_id="wk", trip_id="t1")
        with pytest.raises(ValidationError):
            trip.trip_id = "t2"

    def test_entity_equality(self):
        assert Trip(route_id="r1", service_id="wk", trip_id="t1") == \
            Trip(route_id="r1", service_id="wk", trip_id="t1")


class TestFeedGraph:
    """Tests for FeedGraph"""

    def test_groups_entities_by_file(self):
        graph = FeedGraph([
            Trip(route_id="r1", service_id="wk", trip_id="t1"),
            StopTime(trip_id="t1", stop_id="s1", stop_sequence=1),
            StopTime(trip_id="t1", stop_id="s2", stop_sequence=2),
        ])

        assert len(graph) == 3
        assert len(graph.trips) == 1
        assert [st.stop_sequence for st in graph.stop_times] == [1, 2]
        assert graph.frequencies == []
        assert graph.entity_counts() == {"trips.txt": 1, "stop_times.txt": 2}

    def test_trip_ids_skip_placeholders(self):
        graph = FeedGraph([
            Trip(route_id="r1", service_id="wk", trip_id="t1"),
            Trip(route_id="r1", service_id="wk", trip_id=None),
        ])
        assert graph.trip_ids() == {"t1"}

    def test_entities_returns_a_copy(self):
        graph = FeedGraph([Trip(route_id="r1", service_id="wk", trip_id="t1")])
        graph.trips.clear()
        assert len(graph.trips) == 1

    def test_unknown_file_is_empty(self):
        assert FeedGraph().entities("shapes.txt") == []

    def test_concurrent_adds(self):
        graph = FeedGraph()

        def add_trips(worker):
            for i in range(250):
                graph.add(Trip(route_id="r1", service_id="wk", trip_id=f"{worker}-{i}"))

        threads = [threading.Thread(target=add_trips, args=(w,)) for w in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(graph) == 1000
        assert len(graph.trip_ids()) == 1000


class TestValidationReport:
    """Tests for ValidationReport model"""

    def test_passed_with_errors_is_rejected(self):
        """Test that passed=True with errors raises ValidationError"""
        with pytest.raises(ValidationError) as exc_info:
            ValidationReport(passed=True, error_count=2)
        assert "error_count" in str(exc_info.value)

    def test_negative_counts_rejected(self):
        with pytest.raises(ValidationError):
            ValidationReport(passed=False, warning_count=-1)

    def test_from_results(self):
        collector = NoticeCollector()
        collector.add(
            MissingRequiredValueNotice(filename="trips.txt", entity_id="", field_name="trip_id")
        )
        collector.add(UnusableTripNotice(filename="trips.txt", entity_id="t1", stop_time_count=0))
        graph = FeedGraph([Trip(route_id="r1", service_id="wk", trip_id="t1")])

        report = ValidationReport.from_results(collector, graph, feed_path="data/feed")

        assert report.passed is False
        assert report.error_count == 1
        assert report.warning_count == 1
        assert report.counts_by_code == {"E_015": 1, "W_014": 1}
        assert report.entity_counts == {"trips.txt": 1}
        assert [n["code"] for n in report.notices] == ["E_015", "W_014"]
        assert report.feed_path == "data/feed"
        assert isinstance(report.generated_at, datetime)

    def test_warnings_only_pass(self):
        collector = NoticeCollector()
        collector.add(UnusableTripNotice(filename="trips.txt", entity_id="t1", stop_time_count=1))

        report = ValidationReport.from_results(collector, FeedGraph())

        assert report.passed is True
        assert report.error_count == 0

    def test_json_serialization(self):
        collector = NoticeCollector()
        collector.add(UnusableTripNotice(filename="trips.txt", entity_id="t1", stop_time_count=1))

        report = ValidationReport.from_results(collector, FeedGraph())
        data = json.loads(report.model_dump_json())

        assert data["passed"] is True
        assert data["notices"][0]["detail"].startswith("Trip with id:t1")
