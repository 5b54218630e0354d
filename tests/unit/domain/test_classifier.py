"""Unit tests for TokenClassifier."""

import unittest
from unittest.mock import MagicMock

import astroid

from magic_numbers_linter.domain.classifier import TokenClassifier
from magic_numbers_linter.domain.entities import NumericKind, NumericLiteralToken
from magic_numbers_linter.domain.literal_visitor import LiteralVisitor


def _tokens(code: str) -> list[NumericLiteralToken]:
    return LiteralVisitor().walk(astroid.parse(code))


def _magic_texts(code: str) -> list[str]:
    return [t.text for t in _tokens(code) if TokenClassifier.is_magic(t)]


class TestParseValue(unittest.TestCase):
    """parse_value() strips separators and fails safe."""

    def test_strips_underscores(self) -> None:
        self.assertEqual(TokenClassifier.canonical_text("1_000.000_01"), "1000.00001")
        self.assertEqual(
            TokenClassifier.parse_value("1_000.000_01"),
            TokenClassifier.parse_value("1000.00001"),
        )

    def test_strips_locale_grouping_marks(self) -> None:
        self.assertEqual(TokenClassifier.parse_value("1'000", NumericKind.INTEGER), 1000.0)
        self.assertEqual(TokenClassifier.parse_value("1,000", NumericKind.INTEGER), 1000.0)

    def test_integer_prefixes(self) -> None:
        self.assertEqual(TokenClassifier.parse_value("0x1F", NumericKind.INTEGER), 31.0)
        self.assertEqual(TokenClassifier.parse_value("0o17", NumericKind.INTEGER), 15.0)
        self.assertEqual(TokenClassifier.parse_value("0b101", NumericKind.INTEGER), 5.0)

    def test_sign_is_part_of_value(self) -> None:
        self.assertEqual(TokenClassifier.parse_value("-1", NumericKind.INTEGER), -1.0)
        self.assertEqual(TokenClassifier.parse_value("-1.0"), -1.0)

    def test_malformed_text_returns_none(self) -> None:
        self.assertIsNone(TokenClassifier.parse_value("1.2.3"))
        self.assertIsNone(TokenClassifier.parse_value(""))
        self.assertIsNone(TokenClassifier.parse_value("abc", NumericKind.INTEGER))
        self.assertIsNone(TokenClassifier.parse_value("2.5", NumericKind.INTEGER))


class TestIsMagic(unittest.TestCase):
    """is_magic() exemptions: 0/1, initializers, decorators, version checks."""

    def test_zero_and_one_are_never_magic(self) -> None:
        self.assertEqual(_magic_texts("array[0] + array[1]"), [])
        self.assertEqual(_magic_texts("foo(0.0, 1.0, -0)"), [])

    def test_minus_one_is_magic(self) -> None:
        self.assertEqual(_magic_texts("items[-1]"), ["-1"])
        self.assertEqual(_magic_texts("items[--1]"), [])

    def test_inline_literals_are_magic(self) -> None:
        self.assertEqual(_magic_texts("foo(321)"), ["321"])
        self.assertEqual(_magic_texts("array[42]"), ["42"])

    def test_separators_do_not_change_classification(self) -> None:
        self.assertEqual(_magic_texts("bar(1_000.000_01)"), _magic_texts("bar(1000.00001)"))
        self.assertEqual(_magic_texts("foo = 1_000.000_01"), [])

    def test_assignment_initializer_is_not_magic(self) -> None:
        self.assertEqual(_magic_texts("foo = 123"), [])
        self.assertEqual(_magic_texts("a = b = 7"), [])
        self.assertEqual(_magic_texts("offset = -5"), [])
        self.assertEqual(_magic_texts("offset = +5"), [])
        self.assertEqual(_magic_texts("offset = -(-5)"), [])

    def test_annotated_and_attribute_initializers_are_not_magic(self) -> None:
        code = (
            "class A:\n"
            "    bar: float = 0.123\n"
            "    def __init__(self):\n"
            "        self.timeout = 30\n"
        )
        self.assertEqual(_magic_texts(code), [])

    def test_parameter_defaults_are_not_magic(self) -> None:
        self.assertEqual(_magic_texts("def f(a, b=5, *, c=2.5):\n    pass"), [])
        self.assertEqual(_magic_texts("g = lambda x=3: x"), [])

    def test_walrus_value_is_not_magic(self) -> None:
        self.assertEqual(_magic_texts("if (n := 10) > size:\n    pass"), [])

    def test_nested_initializer_literals_are_magic(self) -> None:
        self.assertEqual(_magic_texts("a = b + 2.0"), ["2.0"])
        self.assertEqual(_magic_texts("box = array[12 + 14]"), ["12", "14"])
        self.assertEqual(_magic_texts("vector = [x, y, 3]"), ["3"])

    def test_subscript_and_unpacking_targets_are_not_declarations(self) -> None:
        self.assertEqual(_magic_texts("array[3] = 5"), ["3", "5"])
        self.assertEqual(_magic_texts("x, y = 3, 4"), ["3", "4"])
        self.assertEqual(_magic_texts("total += 5"), ["5"])

    def test_decorator_arguments_are_not_magic(self) -> None:
        code = "@lru_cache(maxsize=128)\ndef f():\n    return 2\n"
        self.assertEqual(_magic_texts(code), ["2"])

    def test_version_checks_are_not_magic(self) -> None:
        self.assertEqual(_magic_texts("if sys.version_info >= (3, 11):\n    pass"), [])
        self.assertEqual(_magic_texts("if sys.version_info[:2] < (3, 10):\n    pass"), [])
        self.assertEqual(_magic_texts("ok = sys.hexversion >= 0x030B0000"), [])

    def test_imported_version_info_checks_are_not_magic(self) -> None:
        code = "from sys import hexversion, version_info\nok = version_info >= (3, 11)\nnew = hexversion > 0x030C0000\n"
        self.assertEqual(_magic_texts(code), [])

    def test_ordinary_comparisons_are_magic(self) -> None:
        self.assertEqual(_magic_texts("assert len(rows) == 3"), ["3"])

    def test_version_exemption_stops_at_statement(self) -> None:
        code = "if sys.version_info >= (3, 11):\n    retry(5)\n"
        self.assertEqual(_magic_texts(code), ["5"])

    def test_literal_without_parent_is_not_magic(self) -> None:
        node = MagicMock()
        node.parent = None
        token = NumericLiteralToken(text="42", kind=NumericKind.INTEGER, node=node)
        self.assertFalse(TokenClassifier.is_magic(token))

    def test_unparseable_token_is_not_magic(self) -> None:
        node = astroid.extract_node("foo(7)").args[0]
        token = NumericLiteralToken(text="7..", kind=NumericKind.FLOAT, node=node)
        self.assertFalse(TokenClassifier.is_magic(token))
