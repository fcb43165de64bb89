"""Pytest configuration.

Run pytest from this project's root. pythonpath in pyproject.toml puts src/
and the project root on sys.path so tests can import tests.unit helpers.
"""

from collections.abc import Iterator

import pytest

from restricted_modules_linter.infrastructure.di.container import RestrictedModulesContainer


@pytest.fixture(autouse=True)
def _reset_container() -> Iterator[None]:
    """The plugin container is process-wide; never leak it between tests."""
    RestrictedModulesContainer.reset()
    yield
    RestrictedModulesContainer.reset()
