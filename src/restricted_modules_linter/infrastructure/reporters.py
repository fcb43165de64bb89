"""Reporter adapter: hands domain violations to pylint's message machinery."""

from typing import TYPE_CHECKING

from restricted_modules_linter.domain.protocols import ReporterProtocol
from restricted_modules_linter.domain.rules import Violation

if TYPE_CHECKING:
    from pylint.checkers import BaseChecker


class PylintReporterAdapter(ReporterProtocol):
    """
    Reports each violation through ``checker.add_message``.

    pylint renders the message template with ``args`` and derives line/column
    from the astroid node kept in ``violation.node.origin``. No filtering or
    deduplication happens here.
    """

    def __init__(self, checker: "BaseChecker") -> None:
        self._checker = checker

    def report(self, violation: Violation) -> None:
        self._checker.add_message(
            violation.code,
            node=violation.node.origin,
            args=violation.message_args,
        )
