"""Domain models for rules and violations."""

from dataclasses import dataclass

__all__ = [
    "Checkable",
    "Violation",
]

from typing import Protocol

from restricted_modules_linter.domain.syntax import SyntaxNode


@dataclass(frozen=True)
class Violation:
    """A rule violation: code, rendered message, offending node and placeholder values."""

    code: str
    message: str
    node: SyntaxNode
    module_name: str
    message_args: tuple[str, ...] = ()
    """Placeholder values for the host message template, in template order."""


class Checkable(Protocol):
    """One-and-done check: given a node, return violations."""

    code: str
    description: str

    def check(self, node: SyntaxNode) -> list[Violation]:
        """Interrogate a node for a breach."""
        ...
