"""
Rule engine for running cross-entity rules over a built feed.

The rule engine loads rule configurations, runs every enabled rule against
the entity graph and produces notices.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any

from feed_validator.core.models import FeedGraph
from feed_validator.core.notices import Notice, NoticeCollector

from .base_rule import BaseRule
from .frequency_rules import FrequencyTimeRangeRule, OverlappingFrequencyRule
from .referential_integrity import DuplicateKeyRule, ForeignKeyRule
from .stop_time_rules import StopTimeArrivalAfterDepartureRule, UnusableTripRule


class RuleEngine:
    """
    Orchestrates cross-entity rules on a FeedGraph.

    Every registered rule runs unless the configuration disables it. Rules
    run independently of each other; their notices are concatenated in
    registry order so repeated runs give identical output.
    """

    RULE_REGISTRY: dict[str, type[BaseRule]] = {
        "duplicate_key": DuplicateKeyRule,
        "foreign_key": ForeignKeyRule,
        "frequency_time_range": FrequencyTimeRangeRule,
        "overlapping_frequency": OverlappingFrequencyRule,
        "stop_time_arrival_after_departure": StopTimeArrivalAfterDepartureRule,
        "unusable_trip": UnusableTripRule,
    }

    def __init__(self, rules: list[dict[str, Any]] | None = None, max_workers: int = 1):
        """
        Initialize the rule engine.

        Args:
            rules: List of rule configurations, each containing:
                   - rule_name: str (key of RULE_REGISTRY)
                   - parameters: Dict[str, Any] (optional)
                   - enabled: bool (default True)
                   Registered rules missing from the list run with defaults.
            max_workers: Number of threads used to run rules concurrently
        """
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")

        self.rules = rules or []
        self.max_workers = max_workers
        self.active_rules: list[BaseRule] = []
        self._build_rules()

    def _build_rules(self) -> None:
        """Build rule instances from rule configurations."""
        overrides: dict[str, dict[str, Any]] = {}
        for rule in self.rules:
            rule_name = rule["rule_name"]
            if rule_name not in self.RULE_REGISTRY:
                raise ValueError(f"Unknown rule: {rule_name}")
            overrides[rule_name] = rule

        for rule_name, rule_class in self.RULE_REGISTRY.items():
            config = overrides.get(rule_name, {})

            # Skip disabled rules
            if not config.get("enabled", True):
                continue

            try:
                self.active_rules.append(rule_class(config.get("parameters", {})))
            except (TypeError, ValueError) as e:
                raise ValueError(f"Failed to create rule '{rule_name}': {e}") from e

    def run(self, graph: FeedGraph) -> list[Notice]:
        """
        Run every active rule against the graph.

        Args:
            graph: Fully built entity graph

        Returns:
            Notices from all rules, grouped by rule in registry order
        """
        if self.max_workers == 1 or len(self.active_rules) <= 1:
            results = [rule.check(graph) for rule in self.active_rules]
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                results = list(executor.map(lambda rule: rule.check(graph), self.active_rules))

        return [notice for rule_notices in results for notice in rule_notices]

    def run_into(self, graph: FeedGraph, collector: NoticeCollector) -> int:
        """Run the rules and emit their notices into collector; return the count."""
        notices = self.run(graph)
        collector.extend(notices)
        return len(notices)

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of loaded rules.

        Returns:
            Dictionary with active and disabled rule names
        """
        active = [rule.rule_name for rule in self.active_rules]
        return {
            "total_rules": len(active),
            "active_rules": active,
            "disabled_rules": [name for name in self.RULE_REGISTRY if name not in active],
        }
