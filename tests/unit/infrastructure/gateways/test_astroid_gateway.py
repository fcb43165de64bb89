"""Unit tests for AstroidGateway conversion."""

import unittest
from unittest.mock import MagicMock

import astroid

from restricted_modules_linter.domain.syntax import (
    CallExpression,
    Identifier,
    Literal,
    OpaqueNode,
    SourceSpan,
)
from restricted_modules_linter.infrastructure.gateways.astroid_gateway import AstroidGateway


class TestAstroidGateway(unittest.TestCase):
    """Test astroid -> syntax variant conversion."""

    def setUp(self) -> None:
        self.gateway = AstroidGateway()

    def test_require_call_with_string(self) -> None:
        node = astroid.extract_node('require("fs")')

        result = self.gateway.to_syntax(node)

        assert isinstance(result, CallExpression)
        self.assertEqual(result.callee, Identifier(name="require", span=SourceSpan(1, 0, 1, 7)))
        self.assertEqual(len(result.arguments), 1)
        first = result.arguments[0]
        assert isinstance(first, Literal)
        self.assertEqual(first.value, "fs")
        self.assertIs(result.origin, node)
        self.assertEqual(result.span, SourceSpan(1, 0, 1, 13))

    def test_arguments_keep_source_order(self) -> None:
        node = astroid.extract_node('require("fs", other, 3)')

        result = self.gateway.to_syntax(node)

        assert isinstance(result, CallExpression)
        kinds = [type(arg) for arg in result.arguments]
        self.assertEqual(kinds, [Literal, Identifier, Literal])

    def test_attribute_callee_is_opaque(self) -> None:
        node = astroid.extract_node('module.require("fs")')

        result = self.gateway.to_syntax(node)

        assert isinstance(result, CallExpression)
        assert isinstance(result.callee, OpaqueNode)
        self.assertEqual(result.callee.host_kind, "Attribute")

    def test_fstring_and_starred_arguments_are_opaque(self) -> None:
        fstring = self.gateway.to_syntax(astroid.extract_node('require(f"{x}")'))
        starred = self.gateway.to_syntax(astroid.extract_node("require(*names)"))

        assert isinstance(fstring, CallExpression)
        assert isinstance(starred, CallExpression)
        self.assertEqual(fstring.arguments[0].host_kind, "JoinedStr")  # type: ignore[union-attr]
        self.assertEqual(starred.arguments[0].host_kind, "Starred")  # type: ignore[union-attr]

    def test_keyword_arguments_are_not_positional(self) -> None:
        result = self.gateway.to_syntax(astroid.extract_node('require(name="fs")'))

        assert isinstance(result, CallExpression)
        self.assertEqual(result.arguments, ())

    def test_non_string_constants_keep_their_value(self) -> None:
        result = self.gateway.to_syntax(astroid.extract_node("require(None)"))

        assert isinstance(result, CallExpression)
        first = result.arguments[0]
        assert isinstance(first, Literal)
        self.assertIsNone(first.value)

    def test_unexpected_node_is_opaque(self) -> None:
        module = astroid.parse("x = 1")

        result = self.gateway.to_syntax(module)

        assert isinstance(result, OpaqueNode)
        self.assertEqual(result.host_kind, "Module")

    def test_call_mock_without_args_does_not_raise(self) -> None:
        node = MagicMock(spec=astroid.nodes.Call)
        node.func = MagicMock(spec=astroid.nodes.Name)
        node.func.name = "require"
        node.args = None

        result = self.gateway.to_syntax(node)

        assert isinstance(result, CallExpression)
        self.assertEqual(result.arguments, ())
        self.assertIsNone(result.span)

    def test_name_without_string_name_is_opaque(self) -> None:
        node = MagicMock(spec=astroid.nodes.Name)
        node.name = None

        self.assertIsInstance(self.gateway.to_syntax(node), OpaqueNode)
