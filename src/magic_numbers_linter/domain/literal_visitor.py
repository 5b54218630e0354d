"""Single-pass walk over an astroid module collecting numeric literals in source order."""

import astroid

from magic_numbers_linter.domain.classifier import TokenClassifier
from magic_numbers_linter.domain.entities import NumericKind, NumericLiteralToken


class LiteralVisitor:
    """
    Collects every integer and floating-point literal of one module.

    The token list is owned by the visitor and rebuilt on every walk(), so a
    visitor can be reused across modules. The tree is only read.
    """

    def __init__(self) -> None:
        self._tokens: list[NumericLiteralToken] = []

    @property
    def tokens(self) -> list[NumericLiteralToken]:
        return list(self._tokens)

    def walk(self, node: astroid.nodes.NodeNG) -> list[NumericLiteralToken]:
        """Visit ``node`` and its descendants; return all literals ordered by position."""
        self._tokens = []
        self._visit(node)
        # astroid child order is not always textual (IfExp yields test before body)
        self._tokens.sort(key=lambda token: token.position)
        return self.tokens

    def violations(self) -> list[NumericLiteralToken]:
        """Literals judged magic, in source order."""
        return [token for token in self._tokens if TokenClassifier.is_magic(token)]

    def _visit(self, node: astroid.nodes.NodeNG) -> None:
        if isinstance(node, astroid.nodes.Const):
            if LiteralVisitor.is_numeric_const(node):
                self._tokens.append(self._make_token(node))
            return
        for child in node.get_children():
            self._visit(child)

    @staticmethod
    def is_numeric_const(node: astroid.nodes.Const) -> bool:
        """int or float, excluding bool (an int subclass) and complex."""
        value = node.value
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    @staticmethod
    def _make_token(node: astroid.nodes.Const) -> NumericLiteralToken:
        kind = NumericKind.FLOAT if isinstance(node.value, float) else NumericKind.INTEGER
        text = node.as_string()
        # Python has no signed literals: fold a chain of directly applied unary +/-.
        negative = False
        outer: astroid.nodes.NodeNG = node
        parent = node.parent
        while (
            isinstance(parent, astroid.nodes.UnaryOp)
            and parent.op in ("-", "+")
            and parent.operand is outer
        ):
            if parent.op == "-":
                negative = not negative
            outer = parent
            parent = parent.parent
        if negative:
            text = f"-{text}"
        return NumericLiteralToken(text=text, kind=kind, node=outer)
