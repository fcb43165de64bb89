"""
Pylint plugin entry point - composition root for the checker plugin.

Load with ``pylint --load-plugins=restricted_modules_linter.checker``.
"""

from pylint.lint import PyLinter

from restricted_modules_linter.infrastructure.di.container import RestrictedModulesContainer
from restricted_modules_linter.use_cases.checks.restricted_modules import (
    RestrictedModulesChecker,
)


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = RestrictedModulesContainer.get_instance()
    linter.register_checker(
        RestrictedModulesChecker(
            linter,
            ast_gateway=container.get_astroid_gateway(),
            config_loader=container.get_config_loader(),
        )
    )
