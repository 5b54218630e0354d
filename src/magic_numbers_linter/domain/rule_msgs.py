"""Pure message-building from a rule descriptor. No I/O or infrastructure imports."""

from magic_numbers_linter.domain.constants import RULE_NUMBER
from magic_numbers_linter.domain.entities import RuleDescriptor, Severity

MessageTuple = tuple[str, str, str, dict[str, bool]]


class RuleMsgBuilder:
    """Builds the Pylint msgs dict for a rule."""

    @staticmethod
    def message_id(severity: Severity, number: str = RULE_NUMBER) -> str:
        """'W9901' for warnings, 'E9901' for errors."""
        return f"{severity.category}{number}"

    @staticmethod
    def build_msgs(
        descriptor: RuleDescriptor, severity: Severity
    ) -> dict[str, MessageTuple]:
        """Build { msgid: (message_template, symbol, description, options) } for checker.msgs.

        Opt-in rules are registered disabled; they must be enabled explicitly
        (``--enable=<symbol>`` or the plugin's ``enabled`` setting).
        """
        description = f"{descriptor.name}: {descriptor.description}"
        options = {"default_enabled": not descriptor.opt_in}
        return {
            RuleMsgBuilder.message_id(severity): (
                descriptor.message_template,
                descriptor.symbol,
                description,
                options,
            )
        }
