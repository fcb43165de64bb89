"""Restricted module checks (W9501)."""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, ClassVar

import astroid
from pylint.checkers import BaseChecker

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from restricted_modules_linter.domain.config import ConfigurationLoader
from restricted_modules_linter.domain.constants import (
    RESTRICTED_MODULE_CODE,
    RESTRICTED_MODULE_DESCRIPTION,
    RESTRICTED_MODULE_SYMBOL,
    RESTRICTED_MODULE_TEMPLATE,
)
from restricted_modules_linter.domain.protocols import SyntaxGatewayProtocol
from restricted_modules_linter.domain.restriction_set import RestrictionSet
from restricted_modules_linter.domain.rules.restricted_modules import (
    InactiveRestrictedModules,
    RestrictedModulesRule,
    RestrictedModulesState,
    Visitor,
)
from restricted_modules_linter.domain.syntax import NodeKind
from restricted_modules_linter.infrastructure.reporters import PylintReporterAdapter

logger = logging.getLogger(__name__)


class RestrictedModulesChecker(BaseChecker):
    """
    W9501: require() of a restricted module. Thin: delegates to RestrictedModulesRule.

    The class defines no visit_* methods. open() asks the rule for its visitor
    table and installs one pylint hook per entry on the instance; pylint's walker
    collects hooks after open(), so an empty restriction set costs nothing per node.
    """

    name: str = "restricted-modules"
    msgs = {
        RESTRICTED_MODULE_CODE: (
            RESTRICTED_MODULE_TEMPLATE,
            RESTRICTED_MODULE_SYMBOL,
            RESTRICTED_MODULE_DESCRIPTION,
        ),
    }
    HOOKS: ClassVar[dict[NodeKind, str]] = {
        NodeKind.CALL_EXPRESSION: "visit_call",
    }
    options = (
        (
            "restricted-modules",
            {
                "default": (),
                "type": "csv",
                "metavar": "<modules>",
                "help": "Comma-separated module names that may not be loaded with require().",
            },
        ),
    )

    def __init__(
        self,
        linter: "PyLinter",
        ast_gateway: SyntaxGatewayProtocol,
        config_loader: ConfigurationLoader,
    ) -> None:
        super().__init__(linter)
        self.config_loader = config_loader
        self._ast_gateway = ast_gateway
        self._rule: RestrictedModulesState = InactiveRestrictedModules()
        self._installed_hooks: list[str] = []

    @property
    def rule(self) -> RestrictedModulesState:
        return self._rule

    def open(self) -> None:
        """Build the restriction set and install hooks. ConfigurationError propagates to pylint."""
        self._uninstall_hooks()
        restriction_set = self._build_restriction_set()
        self._rule = RestrictedModulesRule.create(
            restriction_set, PylintReporterAdapter(self))
        for kind, visitor in self._rule.visitors().items():
            hook = self.HOOKS[kind]
            setattr(self, hook, self._make_hook(visitor))
            self._installed_hooks.append(hook)
        logger.debug(
            "restricted-modules: %d module(s), hooks=%s",
            len(restriction_set), self._installed_hooks or "none",
        )

    def close(self) -> None:
        self._uninstall_hooks()
        self._rule = InactiveRestrictedModules()

    def _build_restriction_set(self) -> RestrictionSet:
        option = getattr(self.linter.config, "restricted_modules", None)
        return self.config_loader.with_modules(option)

    def _make_hook(self, visitor: Visitor) -> Callable[[astroid.nodes.NodeNG], None]:
        def hook(node: astroid.nodes.NodeNG) -> None:
            visitor(self._ast_gateway.to_syntax(node))
        return hook

    def _uninstall_hooks(self) -> None:
        for hook in self._installed_hooks:
            self.__dict__.pop(hook, None)
        self._installed_hooks = []
