"""Runs pylint in-process with only the restricted-modules message enabled."""

import logging
from collections.abc import Sequence

from pylint.lint import Run

from restricted_modules_linter.domain.constants import RESTRICTED_MODULE_SYMBOL

logger = logging.getLogger(__name__)

PLUGIN = "restricted_modules_linter.checker"


class PylintRunner:
    """Adapter for pylint. Output and exit status are pylint's own."""

    @staticmethod
    def build_args(paths: Sequence[str], modules: Sequence[str]) -> list[str]:
        args = [
            f"--load-plugins={PLUGIN}",
            "--disable=all",
            f"--enable={RESTRICTED_MODULE_SYMBOL}",
            "--score=n",
        ]
        if modules:
            args.append(f"--restricted-modules={','.join(modules)}")
        return [*args, *paths]

    def run(self, paths: Sequence[str], modules: Sequence[str]) -> int:
        """Lint paths and return pylint's exit status bitmask."""
        args = self.build_args(paths, modules)
        logger.debug("Running pylint %s", " ".join(args))
        result = Run(args, exit=False)
        return int(result.linter.msg_status)
