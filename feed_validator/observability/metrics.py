"""
Prometheus metrics collection for feed-validator

Counts built entities and emitted notices, and times both validation
phases. Metrics live in a private registry and are exposed only when
start_metrics_server() is called.
"""
import os
from typing import Optional

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# BUILD PHASE METRICS
# =======================

records_built_total = Counter(
    name="feed_validator_records_built_total",
    documentation="Total number of raw records turned into entities",
    labelnames=["filename"],
    registry=REGISTRY,
)

records_skipped_total = Counter(
    name="feed_validator_records_skipped_total",
    documentation="Raw records from files that have no entity builder",
    labelnames=["filename"],
    registry=REGISTRY,
)

# =======================
# NOTICE METRICS
# =======================

notices_emitted_total = Counter(
    name="feed_validator_notices_emitted_total",
    documentation="Total number of notices emitted",
    labelnames=["code", "severity"],
    registry=REGISTRY,
)

# =======================
# DURATION METRICS
# =======================

phase_duration_seconds = Histogram(
    name="feed_validator_phase_duration_seconds",
    documentation="Time spent in each validation phase in seconds",
    labelnames=["phase"],  # phase: build, rules
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 10.0, 30.0, 60.0, 120.0],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def start_metrics_server(port: Optional[int] = None) -> None:
    """
    Start HTTP server for Prometheus metrics

    Args:
        port: Port to listen on (defaults to env var METRICS_PORT or 8000)
    """
    # Imported lazily so importing this module never binds a port
    from prometheus_client import start_http_server

    metrics_port = port or int(os.getenv("METRICS_PORT", "8000"))
    start_http_server(metrics_port, registry=REGISTRY)


class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(phase_duration_seconds, phase="build"):
            # do work
            pass
    """

    def __init__(self, histogram: Histogram, **labels):
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        self.timer = self.histogram.labels(**self.labels).time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


def record_notice_counts(counts_by_code_and_severity: dict[tuple[str, str], int]) -> None:
    """
    Record emitted notices.

    Args:
        counts_by_code_and_severity: (code, severity) -> number of notices
    """
    for (code, severity), count in counts_by_code_and_severity.items():
        if count > 0:
            increment_counter(notices_emitted_total, count, code=code, severity=severity)


def record_entity_counts(entity_counts: dict[str, int]) -> None:
    for filename, count in entity_counts.items():
        if count > 0:
            increment_counter(records_built_total, count, filename=filename)
