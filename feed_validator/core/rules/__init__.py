"""
Cross-entity validation rules, rule engine and configuration management.
"""

from .base_rule import BaseRule
from .frequency_rules import FrequencyTimeRangeRule, OverlappingFrequencyRule
from .referential_integrity import DuplicateKeyRule, ForeignKeyRule
from .rule_config import RuleConfigBuilder, RuleConfigLoader
from .rule_engine import RuleEngine
from .stop_time_rules import StopTimeArrivalAfterDepartureRule, UnusableTripRule

__all__ = [
    "BaseRule",
    "DuplicateKeyRule",
    "ForeignKeyRule",
    "FrequencyTimeRangeRule",
    "OverlappingFrequencyRule",
    "StopTimeArrivalAfterDepartureRule",
    "UnusableTripRule",
    "RuleEngine",
    "RuleConfigLoader",
    "RuleConfigBuilder",
]
