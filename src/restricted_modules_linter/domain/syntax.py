"""
Syntax-tree variants read by rules.

Rules never touch host (astroid) nodes directly. A gateway converts host nodes
into these frozen variants and keeps the original node in ``origin`` so a
reporter can hand it back to the host for location data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union


class NodeKind(Enum):
    """Discriminant shared by all syntax variants."""

    CALL_EXPRESSION = "CallExpression"
    IDENTIFIER = "Identifier"
    LITERAL = "Literal"
    OPAQUE = "Opaque"


@dataclass(frozen=True)
class SourceSpan:
    """1-based line, 0-based column, as reported by the host parser."""

    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None


@dataclass(frozen=True)
class Identifier:
    """A bare name reference such as ``require``."""

    kind: ClassVar[NodeKind] = NodeKind.IDENTIFIER

    name: str
    span: SourceSpan | None = None
    origin: object | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Literal:
    """A constant written directly in source: str, int, float, bool, None, bytes."""

    kind: ClassVar[NodeKind] = NodeKind.LITERAL

    value: object
    span: SourceSpan | None = None
    origin: object | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class OpaqueNode:
    """Any host node the rules do not model (attributes, f-strings, starred args...)."""

    kind: ClassVar[NodeKind] = NodeKind.OPAQUE

    host_kind: str
    span: SourceSpan | None = None
    origin: object | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class CallExpression:
    """Invocation of ``callee`` with positional ``arguments`` in source order."""

    kind: ClassVar[NodeKind] = NodeKind.CALL_EXPRESSION

    callee: SyntaxNode
    arguments: tuple[SyntaxNode, ...] = ()
    span: SourceSpan | None = None
    origin: object | None = field(default=None, compare=False, repr=False)


SyntaxNode = Union[CallExpression, Identifier, Literal, OpaqueNode]
