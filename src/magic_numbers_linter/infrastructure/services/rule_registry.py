"""RuleRegistryService: loads the rule registry and builds immutable rule descriptors."""

from pathlib import Path
from typing import cast

import yaml

from magic_numbers_linter.domain.constants import REGISTRY_PREFIX, RULE_IDENTIFIER
from magic_numbers_linter.domain.entities import Example, RuleDescriptor, RuleKind
from magic_numbers_linter.domain.registry_types import RuleRegistryEntry


class RuleRegistryError(LookupError):
    """The packaged registry is missing or has no entry for the requested rule."""


class RuleRegistryService:
    """Loads rule_registry.yaml once and provides registry entries and RuleDescriptors."""

    def __init__(self, registry_path: str | None = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent.parent
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, RuleRegistryEntry] = {}
        self._descriptors: dict[str, RuleDescriptor] = {}
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        if not self._path.exists():
            raise RuleRegistryError(f"Rule registry not found: {self._path}")
        with open(self._path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        self._registry = (
            cast(dict[str, RuleRegistryEntry], data) if isinstance(data, dict) else {}
        )

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Return a shallow copy of the loaded registry."""
        return dict(self._registry)

    def get_entry(self, identifier: str = RULE_IDENTIFIER) -> RuleRegistryEntry | None:
        """Return the registry entry for a rule by identifier or symbol."""
        entry = self._registry.get(f"{REGISTRY_PREFIX}{identifier}")
        if isinstance(entry, dict):
            return cast(RuleRegistryEntry, dict(entry))
        for rid, e in self._registry.items():
            if not rid.startswith(REGISTRY_PREFIX) or not isinstance(e, dict):
                continue
            if e.get("symbol") == identifier:
                return cast(RuleRegistryEntry, dict(e))
        return None

    def get_manual_instructions(self, identifier: str = RULE_IDENTIFIER) -> str:
        entry = self.get_entry(identifier)
        return str(entry.get("manual_instructions", "")) if entry else ""

    def get_descriptor(self, identifier: str = RULE_IDENTIFIER) -> RuleDescriptor:
        """Build (once) the RuleDescriptor for a rule. Raises RuleRegistryError if absent."""
        cached = self._descriptors.get(identifier)
        if cached is not None:
            return cached
        entry = self.get_entry(identifier)
        if entry is None:
            raise RuleRegistryError(f"No registry entry for rule '{identifier}' in {self._path}")
        descriptor = RuleRegistryService._descriptor_from_entry(entry, identifier)
        self._descriptors[identifier] = descriptor
        return descriptor

    @staticmethod
    def _descriptor_from_entry(entry: RuleRegistryEntry, identifier: str) -> RuleDescriptor:
        try:
            kind = RuleKind(str(entry.get("kind", RuleKind.IDIOMATIC.value)))
        except ValueError as exc:
            raise RuleRegistryError(f"Unknown rule kind for '{identifier}': {entry.get('kind')!r}") from exc
        return RuleDescriptor(
            identifier=str(entry.get("identifier", identifier)),
            symbol=str(entry.get("symbol", identifier)),
            name=str(entry.get("display_name", identifier)),
            description=str(entry.get("short_description", "")),
            kind=kind,
            message_template=str(entry.get("message_template", "%s")),
            opt_in=bool(entry.get("opt_in", True)),
            non_triggering_examples=tuple(
                Example(str(code)) for code in entry.get("non_triggering_examples", [])
            ),
            triggering_examples=tuple(
                Example(str(code)) for code in entry.get("triggering_examples", [])
            ),
        )
