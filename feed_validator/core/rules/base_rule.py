"""
Base rule interface for cross-entity validation.

All rules inherit from BaseRule and implement check().
"""

from abc import ABC, abstractmethod
from typing import Any

from feed_validator.core.models import FeedGraph
from feed_validator.core.notices import Notice


class BaseRule(ABC):
    """
    Abstract base class for all cross-entity rules.

    A rule reads the fully built FeedGraph and returns the notices it finds.
    It must not mutate the graph or depend on any other rule's output.
    """

    def __init__(self, parameters: dict[str, Any] | None = None):
        """
        Initialize rule.

        Args:
            parameters: Rule-specific parameters (e.g., min_stop_times)
        """
        self.parameters = parameters or {}

    @abstractmethod
    def check(self, graph: FeedGraph) -> list[Notice]:
        """
        Run the rule against a feed.

        Args:
            graph: Entities of every parsed feed file

        Returns:
            Notices describing each violation found
        """
        pass

    @property
    @abstractmethod
    def rule_name(self) -> str:
        """Return the rule identifier used in configuration."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(params={self.parameters})"
