"""No magic numbers check (W9901 / E9901)."""

from typing import TYPE_CHECKING

import astroid
from pylint.checkers import BaseChecker

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from magic_numbers_linter.domain.entities import RuleDescriptor
from magic_numbers_linter.domain.rule_msgs import RuleMsgBuilder
from magic_numbers_linter.domain.rules.no_magic_numbers import NoMagicNumbersRule


class MagicNumberChecker(BaseChecker):
    """W9901: Magic numbers. Thin: delegates to NoMagicNumbersRule."""

    name: str = "no-magic-numbers"

    def __init__(
        self,
        linter: "PyLinter",
        rule: NoMagicNumbersRule,
        descriptor: RuleDescriptor,
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs(
            descriptor, rule.severity)  # type: ignore[assignment]
        super().__init__(linter)
        self._rule = rule
        self._descriptor = descriptor

    @property
    def descriptor(self) -> RuleDescriptor:
        return self._descriptor

    def visit_module(self, node: astroid.nodes.Module) -> None:
        """Delegate to the domain rule; report each violation in source order."""
        for v in self._rule.check(node):
            self.add_message(
                v.code,
                node=v.node,
                args=v.message_args or (),
            )
