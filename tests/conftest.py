"""
Pytest configuration and fixtures for feed-validator tests

This module provides shared fixtures for unit and integration tests.
"""
import csv
from collections.abc import Callable
from pathlib import Path

import pytest

from feed_validator.core.models import RawRecord


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that run the full pipeline on files in a temporary directory"
    )


# =======================
# RECORD FIXTURES
# =======================

@pytest.fixture
def make_record() -> Callable[..., RawRecord]:
    """
    Factory for RawRecords

    Usage:
        record = make_record("stop_times.txt", trip_id="t1", stop_sequence="1")
    """
    def _make(filename: str, row_number: int | None = None, **fields) -> RawRecord:
        return RawRecord.of(filename, fields, row_number=row_number)

    return _make


@pytest.fixture
def valid_stop_time_fields() -> dict[str, str]:
    """Fields of a stop_times.txt row without any problem"""
    return {
        "trip_id": "t1",
        "arrival_time": "08:00:00",
        "departure_time": "08:01:00",
        "stop_id": "s1",
        "stop_sequence": "1",
        "pickup_type": "0",
        "drop_off_type": "0",
    }


# =======================
# FILE FIXTURES
# =======================

def write_feed_file(directory: Path, filename: str, rows: list[dict[str, str]]) -> Path:
    """Write rows as a CSV feed file with a header taken from the first row"""
    path = directory / filename
    header = list(rows[0].keys())
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=header)
        writer.writeheader()
        writer.writerows(rows)
    return path


@pytest.fixture
def feed_dir(tmp_path) -> Path:
    """
    Small feed with known problems:

    - stop_times.txt: pickup_type 9 on t1/2, trip t9 not in trips.txt
    - frequencies.txt: two overlapping periods on t1
    - trips.txt: t2 has a single stop time
    """
    directory = tmp_path / "feed"
    directory.mkdir()

    write_feed_file(directory, "trips.txt", [
        {"route_id": "r1", "service_id": "wk", "trip_id": "t1", "bikes_allowed": "1"},
        {"route_id": "r1", "service_id": "wk", "trip_id": "t2", "bikes_allowed": ""},
    ])
    write_feed_file(directory, "stop_times.txt", [
        {"trip_id": "t1", "arrival_time": "08:00:00", "departure_time": "08:00:00",
         "stop_id": "s1", "stop_sequence": "1", "pickup_type": "0"},
        {"trip_id": "t1", "arrival_time": "08:10:00", "departure_time": "08:11:00",
         "stop_id": "s2", "stop_sequence": "2", "pickup_type": "9"},
        {"trip_id": "t2", "arrival_time": "09:00:00", "departure_time": "09:00:00",
         "stop_id": "s1", "stop_sequence": "1", "pickup_type": ""},
        {"trip_id": "t9", "arrival_time": "10:00:00", "departure_time": "10:00:00",
         "stop_id": "s1", "stop_sequence": "1", "pickup_type": ""},
    ])
    write_feed_file(directory, "frequencies.txt", [
        {"trip_id": "t1", "start_time": "06:00:00", "end_time": "09:00:00", "headway_secs": "600"},
        {"trip_id": "t1", "start_time": "08:30:00", "end_time": "12:00:00", "headway_secs": "900"},
    ])
    return directory


@pytest.fixture
def clean_feed_dir(tmp_path) -> Path:
    """Small feed without any problem"""
    directory = tmp_path / "clean_feed"
    directory.mkdir()

    write_feed_file(directory, "trips.txt", [
        {"route_id": "r1", "service_id": "wk", "trip_id": "t1"},
    ])
    write_feed_file(directory, "stop_times.txt", [
        {"trip_id": "t1", "arrival_time": "08:00:00", "departure_time": "08:00:00",
         "stop_id": "s1", "stop_sequence": "1"},
        {"trip_id": "t1", "arrival_time": "08:10:00", "departure_time": "08:10:30",
         "stop_id": "s2", "stop_sequence": "2"},
    ])
    write_feed_file(directory, "frequencies.txt", [
        {"trip_id": "t1", "start_time": "06:00:00", "end_time": "09:00:00", "headway_secs": "600"},
        {"trip_id": "t1", "start_time": "09:00:00", "end_time": "12:00:00", "headway_secs": "900"},
    ])
    return directory
