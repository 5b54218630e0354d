"""No magic numbers rule (W9901 / E9901): numeric literals used inline instead of named constants."""

import astroid

from magic_numbers_linter.domain.constants import RULE_NUMBER
from magic_numbers_linter.domain.entities import Severity
from magic_numbers_linter.domain.literal_visitor import LiteralVisitor
from magic_numbers_linter.domain.rules import Checkable, Violation


class NoMagicNumbersRule(Checkable):
    """
    Rule for W9901: numeric literal that should be a named constant.

    Stateless across modules: every check() builds a fresh LiteralVisitor, so
    nothing leaks from one file into the next. Severity is fixed at construction.
    """

    description: str = "Magic numbers should be replaced by named constants."
    message_template: str = "Magic number %s should be replaced by a named constant"

    def __init__(
        self,
        severity: Severity = Severity.WARNING,
        message_template: str | None = None,
    ) -> None:
        self._severity = severity
        if message_template is not None:
            self.message_template = message_template

    @property
    def severity(self) -> Severity:
        return self._severity

    @property
    def code(self) -> str:
        return f"{self._severity.category}{RULE_NUMBER}"

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        """Check a Module; return one violation per magic literal in source order."""
        if not isinstance(node, astroid.nodes.Module):
            return []
        visitor = LiteralVisitor()
        visitor.walk(node)
        return [
            Violation.from_node(
                code=self.code,
                message=self.message_template % token.text,
                node=token.node,
                severity=self._severity,
                message_args=(token.text,),
            )
            for token in visitor.violations()
        ]
