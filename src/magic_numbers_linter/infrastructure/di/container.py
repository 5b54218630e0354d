from typing import Any, Optional, cast

from magic_numbers_linter.domain.config import ConfigurationLoader
from magic_numbers_linter.domain.entities import RuleDescriptor
from magic_numbers_linter.domain.rules.no_magic_numbers import NoMagicNumbersRule
from magic_numbers_linter.infrastructure.config_file_loader import ConfigFileLoader
from magic_numbers_linter.infrastructure.services.rule_registry import RuleRegistryService


class MagicNumbersContainer:
    """Dependency Injection Container for the no-magic-numbers plugin."""

    _instance: Optional["MagicNumbersContainer"] = None

    def __init__(
        self,
        config_loader: ConfigurationLoader | None = None,
        registry_service: RuleRegistryService | None = None,
    ) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_loader, registry_service)

    def _register_defaults(
        self,
        config_loader: ConfigurationLoader | None,
        registry_service: RuleRegistryService | None,
    ) -> None:
        """Register default implementations. Config and registry are read once, here."""
        if config_loader is None:
            config_loader = ConfigurationLoader(ConfigFileLoader.load_config_from_fs())
        self.register_singleton("ConfigurationLoader", config_loader)
        self.register_singleton("RuleRegistryService", registry_service or RuleRegistryService())

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_registry_service(self) -> RuleRegistryService:
        return cast(RuleRegistryService, self.get("RuleRegistryService"))

    def get_descriptor(self) -> RuleDescriptor:
        """Return the no-magic-numbers descriptor (built once by the registry service)."""
        return self.get_registry_service().get_descriptor()

    def create_rule(self) -> NoMagicNumbersRule:
        """A rule bound to the configured severity and the registry's message template."""
        return NoMagicNumbersRule(
            severity=self.get_config_loader().severity,
            message_template=self.get_descriptor().message_template,
        )

    @classmethod
    def get_instance(cls) -> "MagicNumbersContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = MagicNumbersContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
