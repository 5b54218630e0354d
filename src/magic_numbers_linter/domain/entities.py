from dataclasses import dataclass
from enum import Enum

import astroid

__all__ = [
    "Example",
    "NumericKind",
    "NumericLiteralToken",
    "RuleDescriptor",
    "RuleKind",
    "Severity",
    "VIOLATION_MARKER",
]

VIOLATION_MARKER: str = "↓"


class Severity(Enum):
    """Configured reporting level of the rule. Maps onto the pylint message category."""

    WARNING = "warning"
    ERROR = "error"

    @property
    def category(self) -> str:
        """Pylint message category letter (W or E)."""
        return "E" if self is Severity.ERROR else "W"

    @classmethod
    def from_config(cls, raw: object) -> "Severity | None":
        """Parse a config value ('warning', 'ERROR', ...). Returns None when unrecognised."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class NumericKind(Enum):
    INTEGER = "integer"
    FLOAT = "float"


class RuleKind(Enum):
    """Documentation category of a rule."""

    IDIOMATIC = "idiomatic"
    LINT = "lint"
    STYLE = "style"


@dataclass(frozen=True)
class NumericLiteralToken:
    """
    One integer or floating-point literal found in a module.

    ``node`` is where the literal is reported: the ``Const`` itself, or the
    ``UnaryOp`` when the literal is directly negated (``-3``). Its parent chain
    is only read, never modified.
    """

    text: str
    kind: NumericKind
    node: astroid.nodes.NodeNG

    @property
    def lineno(self) -> int:
        return getattr(self.node, "lineno", 0) or 0

    @property
    def col_offset(self) -> int:
        return getattr(self.node, "col_offset", 0) or 0

    @property
    def position(self) -> tuple[int, int]:
        """(line, column) of the first character of the literal."""
        return (self.lineno, self.col_offset)


@dataclass(frozen=True)
class Example:
    """A documentation / regression snippet. Each ``↓`` marks where a violation is expected."""

    code: str

    @property
    def source(self) -> str:
        """The snippet with markers removed, ready to parse."""
        return self.code.replace(VIOLATION_MARKER, "")

    @property
    def expected_positions(self) -> list[tuple[int, int]]:
        """(line, col_offset) of every marker, measured in the marker-free source."""
        positions: list[tuple[int, int]] = []
        for lineno, line in enumerate(self.code.splitlines(), start=1):
            removed = 0
            for index, char in enumerate(line):
                if char == VIOLATION_MARKER:
                    positions.append((lineno, index - removed))
                    removed += 1
        return positions


@dataclass(frozen=True)
class RuleDescriptor:
    """Static metadata of a rule: naming, docs, opt-in status and example corpora."""

    identifier: str
    symbol: str
    name: str
    description: str
    kind: RuleKind
    message_template: str
    opt_in: bool = True
    non_triggering_examples: tuple[Example, ...] = ()
    triggering_examples: tuple[Example, ...] = ()

    @property
    def all_examples(self) -> tuple[Example, ...]:
        return self.non_triggering_examples + self.triggering_examples
