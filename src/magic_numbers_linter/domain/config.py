"""Configuration for the plugin. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from magic_numbers_linter.domain.entities import Severity

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Immutable configuration read from ``[tool.no-magic-numbers]``.

    Created by Infrastructure. Domain does not read the filesystem; Infrastructure
    calls ConfigFileLoader.load_config_from_fs() and constructs
    ConfigurationLoader(config_dict) at composition root.
    """

    KNOWN_KEYS: frozenset[str] = frozenset({"severity", "enabled"})

    def __init__(self, config_dict: dict[str, object]) -> None:
        """Set config once at construction. No mutable class or instance state after init."""
        self._config = config_dict
        self._severity = Severity.WARNING
        if config_dict:
            self._severity = self.validate_config(config_dict)

    def validate_config(self, config: dict[str, object]) -> Severity:
        """Validate configuration values; unknown or invalid values are logged and ignored."""
        for key in sorted(set(config) - self.KNOWN_KEYS):
            logger.warning(
                "Configuration Warning: unknown key '%s' in [tool.no-magic-numbers] is ignored.", key
            )
        raw = config.get("severity")
        if raw is None:
            return Severity.WARNING
        severity = Severity.from_config(raw)
        if severity is None:
            logger.warning(
                "Configuration Warning: severity %r is not one of 'warning', 'error'. "
                "Falling back to 'warning'.",
                raw,
            )
            return Severity.WARNING
        return severity

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def severity(self) -> Severity:
        """Reporting level of the rule; warning unless configured otherwise."""
        return self._severity

    @property
    def enabled(self) -> bool:
        """Opt-in switch. The rule stays disabled unless this is true or pylint enables it."""
        return self._config.get("enabled", False) is True
