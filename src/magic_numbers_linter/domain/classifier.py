"""Decides whether a single numeric literal is a magic number."""

import astroid

from magic_numbers_linter.domain.constants import (
    DIGIT_GROUP_SEPARATORS,
    EXEMPT_VALUES,
    VERSION_CHECK_ATTRIBUTES,
)
from magic_numbers_linter.domain.entities import NumericKind, NumericLiteralToken


class TokenClassifier:
    """
    Pure predicate over a literal and its parent chain.

    A literal is magic unless its value is 0 or 1, it is the whole value bound
    by a declaration, or it sits in a decorator or interpreter-version check.
    Anything the classifier cannot interpret is treated as not magic.
    """

    @staticmethod
    def is_magic(token: NumericLiteralToken) -> bool:
        value = TokenClassifier.parse_value(token.text, token.kind)
        if value is None or value in EXEMPT_VALUES:
            return False
        parent = getattr(token.node, "parent", None)
        if parent is None:
            return False
        if TokenClassifier.is_declaration_initializer(token.node):
            return False
        if TokenClassifier.is_in_availability_context(token.node):
            return False
        return True

    @staticmethod
    def canonical_text(text: str) -> str:
        """Strip digit-group separators: '1_000.000_01' -> '1000.00001'."""
        return "".join(ch for ch in text.strip() if ch not in DIGIT_GROUP_SEPARATORS)

    @staticmethod
    def parse_value(text: str, kind: NumericKind = NumericKind.FLOAT) -> float | None:
        """Parse a literal as written. Returns None when it cannot be interpreted."""
        canonical = TokenClassifier.canonical_text(text)
        if not canonical:
            return None
        try:
            if kind is NumericKind.INTEGER:
                # base 0 accepts 0x / 0o / 0b prefixes
                return float(int(canonical, 0))
            return float(canonical)
        except (ValueError, OverflowError):
            return None

    @staticmethod
    def is_declaration_initializer(node: astroid.nodes.NodeNG) -> bool:
        """True when ``node`` is the entire right-hand side of a binding or a parameter default."""
        parent = node.parent
        if isinstance(parent, astroid.nodes.Assign):
            return parent.value is node and all(
                isinstance(target, (astroid.nodes.AssignName, astroid.nodes.AssignAttr))
                for target in parent.targets
            )
        if isinstance(parent, (astroid.nodes.AnnAssign, astroid.nodes.NamedExpr)):
            return parent.value is node
        if isinstance(parent, astroid.nodes.Arguments):
            defaults = list(parent.defaults or []) + list(parent.kw_defaults or [])
            return any(default is node for default in defaults)
        return False

    @staticmethod
    def is_in_availability_context(node: astroid.nodes.NodeNG) -> bool:
        """True inside a decorator or a comparison against sys.version_info / sys.hexversion."""
        current = node.parent
        while current is not None:
            if isinstance(current, astroid.nodes.Decorators):
                return True
            if isinstance(current, astroid.nodes.Compare) and TokenClassifier._is_version_check(current):
                return True
            if current.is_statement:
                return False
            current = current.parent
        return False

    @staticmethod
    def _is_version_check(compare: astroid.nodes.Compare) -> bool:
        operands = [compare.left] + [operand for _, operand in compare.ops]
        for operand in operands:
            # nodes_of_class includes the operand itself
            for attribute in operand.nodes_of_class(astroid.nodes.Attribute):
                if attribute.attrname in VERSION_CHECK_ATTRIBUTES:
                    return True
            # from sys import version_info
            for name in operand.nodes_of_class(astroid.nodes.Name):
                if name.name in VERSION_CHECK_ATTRIBUTES:
                    return True
        return False
