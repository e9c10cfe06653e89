"""
ValidationReport model summarizing the outcome of validating a feed.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from feed_validator.core.notices import NoticeCollector, Severity

from .feed_graph import FeedGraph


class ValidationReport(BaseModel):
    """
    Outcome of validating a feed.

    Attributes:
        feed_path: Where the feed was read from, if known
        passed: True when no ERROR notice was emitted
        error_count: Number of ERROR notices
        warning_count: Number of WARNING notices
        counts_by_code: Notice code -> number of notices
        entity_counts: Feed filename -> number of entities built
        notices: Serialized notices in discovery order
        generated_at: When the report was produced
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "feed_path": "data/feeds/sample",
                "passed": False,
                "error_count": 1,
                "warning_count": 0,
                "counts_by_code": {"E_021": 1},
                "entity_counts": {"stop_times.txt": 2, "trips.txt": 1},
                "notices": [
                    {
                        "code": "E_021",
                        "severity": "ERROR",
                        "title": "Unexpected enum value",
                        "detail": "Invalid value :9 - for field:pickup_type in entity with id:t1;1. "
                        "Expected one of: [0, 1, 2, 3]",
                        "filename": "stop_times.txt",
                        "entity_id": "t1;1",
                        "field_name": "pickup_type",
                        "enum_value": 9,
                        "expected_values": [0, 1, 2, 3],
                    }
                ],
            }
        }
    )

    feed_path: str | None = None
    passed: bool
    error_count: int = Field(0, ge=0)
    warning_count: int = Field(0, ge=0)
    counts_by_code: dict[str, int] = Field(default_factory=dict)
    entity_counts: dict[str, int] = Field(default_factory=dict)
    notices: list[dict[str, Any]] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("error_count")
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies no errors."""
        if info.data.get("passed") and v > 0:
            raise ValueError("passed=True but error_count is not zero")
        return v

    @classmethod
    def from_results(
        cls,
        collector: NoticeCollector,
        graph: FeedGraph,
        feed_path: str | None = None,
    ) -> "ValidationReport":
        """Assemble a report from the collected notices and the entity graph."""
        notices = collector.notices
        by_severity = collector.count_by_severity()
        error_count = by_severity.get(Severity.ERROR.value, 0)

        return cls(
            feed_path=feed_path,
            passed=error_count == 0,
            error_count=error_count,
            warning_count=by_severity.get(Severity.WARNING.value, 0),
            counts_by_code=collector.count_by_code(),
            entity_counts=graph.entity_counts(),
            notices=[notice.to_dict() for notice in notices],
        )
