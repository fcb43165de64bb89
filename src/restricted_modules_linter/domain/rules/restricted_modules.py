"""Restricted modules rule (W9501): flag require("<name>") when <name> is restricted."""

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Union

from restricted_modules_linter.domain.constants import (
    LOADER_NAME,
    RESTRICTED_MODULE_CODE,
    RESTRICTED_MODULE_DESCRIPTION,
    RESTRICTED_MODULE_TEMPLATE,
)
from restricted_modules_linter.domain.rules import Checkable, Violation
from restricted_modules_linter.domain.syntax import (
    CallExpression,
    Identifier,
    Literal,
    NodeKind,
    SyntaxNode,
)

if TYPE_CHECKING:
    from restricted_modules_linter.domain.protocols import ReporterProtocol
    from restricted_modules_linter.domain.restriction_set import RestrictionSet

Visitor = Callable[[SyntaxNode], None]


class RestrictedModulesRule:
    """
    Matcher for W9501 plus the factory choosing the rule state.

    Only an unqualified ``require`` is recognized, by name. Whether that name is
    shadowed by a local definition is not checked.
    """

    code: str = RESTRICTED_MODULE_CODE
    description: str = RESTRICTED_MODULE_DESCRIPTION

    @staticmethod
    def create(
        restriction_set: "RestrictionSet",
        reporter: "ReporterProtocol",
    ) -> "RestrictedModulesState":
        """Active rule for a non-empty set, inactive (no visitors at all) otherwise."""
        if not restriction_set:
            return InactiveRestrictedModules()
        return ActiveRestrictedModules(restriction_set, reporter)

    @staticmethod
    def build_message(module_name: str) -> str:
        return RESTRICTED_MODULE_TEMPLATE % (module_name,)

    @staticmethod
    def evaluate(node: SyntaxNode, restriction_set: "RestrictionSet") -> Violation | None:
        """Return a Violation if node is require("<restricted>"), else None. Pure."""
        module_name = RestrictedModulesRule.loaded_module_name(node)
        if module_name is None or module_name not in restriction_set:
            return None
        return Violation(
            code=RestrictedModulesRule.code,
            message=RestrictedModulesRule.build_message(module_name),
            node=node,
            module_name=module_name,
            message_args=(module_name,),
        )

    @staticmethod
    def loaded_module_name(node: SyntaxNode) -> str | None:
        """Trimmed string literal passed first to require(), or None for any other shape."""
        if not isinstance(node, CallExpression):
            return None
        callee = node.callee
        if not isinstance(callee, Identifier) or callee.name != LOADER_NAME:
            return None
        if not node.arguments:
            return None
        first = node.arguments[0]
        if not isinstance(first, Literal) or not isinstance(first.value, str):
            return None
        return first.value.strip()


class ActiveRestrictedModules(Checkable):
    """Rule state holding a non-empty restriction set; registers one call visitor."""

    code: str = RestrictedModulesRule.code
    description: str = RestrictedModulesRule.description

    def __init__(
        self,
        restriction_set: "RestrictionSet",
        reporter: "ReporterProtocol",
    ) -> None:
        self._restriction_set = restriction_set
        self._reporter = reporter

    @property
    def restriction_set(self) -> "RestrictionSet":
        return self._restriction_set

    def check(self, node: SyntaxNode) -> list[Violation]:
        violation = RestrictedModulesRule.evaluate(node, self._restriction_set)
        return [violation] if violation else []

    def visit_call_expression(self, node: SyntaxNode) -> None:
        """Report the violation for this call, if any."""
        for violation in self.check(node):
            self._reporter.report(violation)

    def visitors(self) -> Mapping[NodeKind, Visitor]:
        return {NodeKind.CALL_EXPRESSION: self.visit_call_expression}


class InactiveRestrictedModules:
    """Rule state for an empty restriction set. Registers nothing with the host."""

    def visitors(self) -> Mapping[NodeKind, Visitor]:
        return {}


RestrictedModulesState = Union[ActiveRestrictedModules, InactiveRestrictedModules]
