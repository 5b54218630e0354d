"""Domain models for rules and violations."""

from dataclasses import dataclass

__all__ = [
    "Checkable",
    "Violation",
]

from typing import Protocol

import astroid

from magic_numbers_linter.domain.entities import Severity


@dataclass(frozen=True)
class Violation:
    """A rule violation with code, message, location and severity."""

    code: str
    message: str
    location: str
    node: astroid.nodes.NodeNG
    severity: Severity = Severity.WARNING
    message_args: tuple[str, ...] | None = None
    """Args for Pylint add_message (e.g. (literal_text,)) when checker is thin."""

    @staticmethod
    def _location_from_node(node: astroid.nodes.NodeNG) -> str:
        """Compute path:lineno:col_offset from an astroid node. Used by from_node."""
        root = node.root()
        path = getattr(root, "file", "") or ""
        lineno = getattr(node, "lineno", 0)
        col_offset = getattr(node, "col_offset", 0)
        return f"{path}:{lineno}:{col_offset}"

    @classmethod
    def from_node(
        cls,
        *,
        code: str,
        message: str,
        node: astroid.nodes.NodeNG,
        severity: Severity = Severity.WARNING,
        message_args: tuple[str, ...] | None = None,
    ) -> "Violation":
        """Build a Violation with location derived from node. Prefer over manual location=."""
        return cls(
            code=code,
            message=message,
            location=cls._location_from_node(node),
            node=node,
            severity=severity,
            message_args=message_args,
        )


class Checkable(Protocol):
    """One-and-done check: given a node, return violations."""

    code: str
    description: str

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        """Interrogate a node for violations."""
        ...
