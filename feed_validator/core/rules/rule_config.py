"""
Rule configuration management.

Loads rule settings from YAML files and provides utilities for building
rule configurations programmatically.
"""

from pathlib import Path
from typing import Any

import yaml


class RuleConfigLoader:
    """
    Loads rule settings from YAML configuration files.

    Expected YAML format:
    ```yaml
    rules:
      overlapping_frequency:
        enabled: true

      unusable_trip:
        enabled: true
        params:
          min_stop_times: 2
    ```

    Rules not listed keep their defaults (enabled, no parameters).
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_rules(self) -> list[dict[str, Any]]:
        """
        Load and parse rule settings from the YAML file.

        Returns:
            List of rule dictionaries suitable for RuleEngine

        Raises:
            ValueError: If YAML is invalid or a rule entry is malformed
        """
        with open(self.config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)

        if not config or "rules" not in config:
            raise ValueError("Configuration file must contain 'rules' section")

        rule_section = config["rules"] or {}
        if not isinstance(rule_section, dict):
            raise ValueError("'rules' section must be a mapping of rule name to settings")

        return [self._parse_rule(rule_name, rule_def) for rule_name, rule_def in rule_section.items()]

    def _parse_rule(self, rule_name: str, rule_def: dict[str, Any] | None) -> dict[str, Any]:
        """
        Parse a single rule entry.

        Args:
            rule_name: Registry name of the rule
            rule_def: The rule settings from YAML (may be empty)

        Returns:
            Parsed rule dictionary

        Raises:
            ValueError: If the rule entry is invalid
        """
        rule_def = rule_def or {}
        if not isinstance(rule_def, dict):
            raise ValueError(f"Settings for rule '{rule_name}' must be a mapping")

        enabled = rule_def.get("enabled", True)
        if not isinstance(enabled, bool):
            raise ValueError(f"'enabled' for rule '{rule_name}' must be true or false")

        parameters = rule_def.get("params", rule_def.get("parameters", {})) or {}
        if not isinstance(parameters, dict):
            raise ValueError(f"Parameters for rule '{rule_name}' must be a mapping")

        return {
            "rule_name": rule_name,
            "parameters": parameters,
            "enabled": enabled,
        }


class RuleConfigBuilder:
    """
    Programmatically build rule configurations (for testing or dynamic rules).
    """

    def __init__(self):
        """Initialize empty rule configuration."""
        self.rules: list[dict[str, Any]] = []

    def enable(self, rule_name: str, **parameters: Any) -> "RuleConfigBuilder":
        """Enable a rule, optionally with parameters."""
        self.rules.append({
            "rule_name": rule_name,
            "parameters": parameters,
            "enabled": True,
        })
        return self

    def disable(self, rule_name: str) -> "RuleConfigBuilder":
        """Disable a rule."""
        self.rules.append({
            "rule_name": rule_name,
            "parameters": {},
            "enabled": False,
        })
        return self

    def build(self) -> list[dict[str, Any]]:
        """Build and return the rule configuration."""
        return self.rules
