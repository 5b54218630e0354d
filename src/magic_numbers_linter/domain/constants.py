"""Names and identifiers shared by the plugin, the registry and the CLI."""

# pyproject.toml section: [tool.no-magic-numbers]
TOOL_SECTION: str = "no-magic-numbers"

REGISTRY_PREFIX: str = "magic-numbers."

RULE_IDENTIFIER: str = "no_magic_numbers"
RULE_SYMBOL: str = "no-magic-numbers"

# Checker id 99; the category letter (W/E) comes from the configured severity.
RULE_NUMBER: str = "9901"

# Separators stripped before a literal is parsed: Python's underscore plus
# common locale grouping marks.
DIGIT_GROUP_SEPARATORS: frozenset[str] = frozenset({"_", "'", ",", " ", " "})

EXEMPT_VALUES: frozenset[float] = frozenset({0.0, 1.0})

# Attributes that make a comparison an interpreter availability check.
VERSION_CHECK_ATTRIBUTES: frozenset[str] = frozenset({"version_info", "hexversion"})
