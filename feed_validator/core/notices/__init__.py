"""
Notice taxonomy.

Severity-classified, stably coded diagnostics emitted by builders and rules.
"""

from .base_notice import (
    ErrorNotice,
    Notice,
    Severity,
    WarningNotice,
    notice_kind,
    registered_notice_kinds,
)
from .collector import NoticeCollector
from .entity_notices import (
    DuplicatedEntityNotice,
    ForeignKeyViolationNotice,
    FrequencyStartAfterEndNotice,
    FrequencyStartEqualsEndNotice,
    OverlappingFrequencyNotice,
    StopTimeArrivalAfterDepartureNotice,
    UnusableTripNotice,
)
from .field_notices import (
    CannotParseFloatNotice,
    CannotParseIntegerNotice,
    FloatFieldValueOutOfRangeNotice,
    IntegerFieldValueOutOfRangeNotice,
    InvalidTimeNotice,
    MissingRequiredValueNotice,
    UnexpectedEnumValueNotice,
)

__all__ = [
    "Severity",
    "Notice",
    "ErrorNotice",
    "WarningNotice",
    "notice_kind",
    "registered_notice_kinds",
    "NoticeCollector",
    "MissingRequiredValueNotice",
    "CannotParseIntegerNotice",
    "CannotParseFloatNotice",
    "IntegerFieldValueOutOfRangeNotice",
    "FloatFieldValueOutOfRangeNotice",
    "InvalidTimeNotice",
    "UnexpectedEnumValueNotice",
    "DuplicatedEntityNotice",
    "ForeignKeyViolationNotice",
    "StopTimeArrivalAfterDepartureNotice",
    "FrequencyStartAfterEndNotice",
    "FrequencyStartEqualsEndNotice",
    "OverlappingFrequencyNotice",
    "UnusableTripNotice",
]
