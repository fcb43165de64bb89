"""Converts astroid nodes into domain syntax variants."""

import astroid

from restricted_modules_linter.domain.protocols import SyntaxGatewayProtocol
from restricted_modules_linter.domain.syntax import (
    CallExpression,
    Identifier,
    Literal,
    OpaqueNode,
    SourceSpan,
    SyntaxNode,
)


class AstroidGateway(SyntaxGatewayProtocol):
    """
    Reads astroid nodes through defensive shape checks.

    Call -> CallExpression, Name -> Identifier, Const -> Literal. Everything
    else (Attribute, JoinedStr, Starred, ...) becomes OpaqueNode. Keyword
    arguments are not part of CallExpression.arguments.
    """

    def to_syntax(self, node: astroid.nodes.NodeNG | None) -> SyntaxNode:
        span = self.get_span(node)
        if isinstance(node, astroid.nodes.Call):
            args = getattr(node, "args", None) or []
            return CallExpression(
                callee=self.to_syntax(getattr(node, "func", None)),
                arguments=tuple(self.to_syntax(arg) for arg in args),
                span=span,
                origin=node,
            )
        if isinstance(node, astroid.nodes.Name):
            name = getattr(node, "name", None)
            if isinstance(name, str):
                return Identifier(name=name, span=span, origin=node)
        if isinstance(node, astroid.nodes.Const):
            return Literal(value=getattr(node, "value", None), span=span, origin=node)
        return OpaqueNode(host_kind=type(node).__name__, span=span, origin=node)

    @staticmethod
    def get_span(node: object) -> SourceSpan | None:
        lineno = getattr(node, "lineno", None)
        col_offset = getattr(node, "col_offset", None)
        if not isinstance(lineno, int) or not isinstance(col_offset, int):
            return None
        end_lineno = getattr(node, "end_lineno", None)
        end_col_offset = getattr(node, "end_col_offset", None)
        return SourceSpan(
            line=lineno,
            column=col_offset,
            end_line=end_lineno if isinstance(end_lineno, int) else None,
            end_column=end_col_offset if isinstance(end_col_offset, int) else None,
        )
