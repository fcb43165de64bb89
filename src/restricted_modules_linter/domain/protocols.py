"""Ports between the domain rules and the host linter."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from restricted_modules_linter.domain.rules import Violation
    from restricted_modules_linter.domain.syntax import SyntaxNode


class ReporterProtocol(Protocol):
    """Delivers violations to the host. Every violation is reported exactly once."""

    def report(self, violation: "Violation") -> None:
        ...


class SyntaxGatewayProtocol(Protocol):
    """Converts host parser nodes into domain syntax variants. Never raises on odd shapes."""

    def to_syntax(self, node: object) -> "SyntaxNode":
        ...
