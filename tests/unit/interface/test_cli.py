"""Unit tests for Typer-based CLI interface."""

from pathlib import Path
from unittest.mock import Mock

import pytest
from typer.testing import CliRunner

from restricted_modules_linter.domain.config import ConfigurationLoader
from restricted_modules_linter.domain.errors import ConfigurationError
from restricted_modules_linter.interface.cli import CLIAppFactory, CLIDependencies

runner = CliRunner()


def _make_app(modules: object = None, status: int = 0) -> tuple[object, Mock]:
    config = {"modules": modules} if modules is not None else {}
    linter_runner = Mock()
    linter_runner.run.return_value = status
    deps = CLIDependencies(
        config_loader=ConfigurationLoader(config),
        linter_runner=linter_runner,
    )
    return CLIAppFactory.create_app(deps), linter_runner


class TestCheckCommand:
    """Test the check command."""

    def test_runs_linter_with_module_extras_only(self) -> None:
        app, linter_runner = _make_app(["fs"], status=4)

        result = runner.invoke(app, ["check", "src", "-m", "net", "-m", "os", "-m", "net"])

        assert result.exit_code == 4
        linter_runner.run.assert_called_once_with(["src"], ["net", "os"])

    def test_configured_modules_are_not_forwarded_to_pylint(self) -> None:
        app, linter_runner = _make_app(["fs"])

        result = runner.invoke(app, ["check", "src"])

        assert result.exit_code == 0
        linter_runner.run.assert_called_once_with(["src"], [])

    def test_whitespace_padded_configured_name_is_not_trimmed(self) -> None:
        app, linter_runner = _make_app([" fs "])

        runner.invoke(app, ["check", "src"])

        _, modules = linter_runner.run.call_args.args
        assert modules == []

    def test_no_modules_exits_cleanly_without_running(self) -> None:
        app, linter_runner = _make_app()

        result = runner.invoke(app, ["check", "src"])

        assert result.exit_code == 0
        assert "nothing to check" in result.output
        linter_runner.run.assert_not_called()

    def test_empty_module_option_is_ignored(self) -> None:
        app, linter_runner = _make_app(["fs"])

        result = runner.invoke(app, ["check", "src", "-m", ""])

        assert result.exit_code == 0
        linter_runner.run.assert_called_once_with(["src"], [])

    def test_only_empty_module_option_has_nothing_to_check(self) -> None:
        app, linter_runner = _make_app()

        result = runner.invoke(app, ["check", "src", "-m", ""])

        assert result.exit_code == 0
        assert "nothing to check" in result.output
        linter_runner.run.assert_not_called()

    def test_malformed_pyproject_modules_fail_at_setup(self) -> None:
        with pytest.raises(ConfigurationError):
            _make_app(["fs", 1])

    def test_paths_are_passed_as_strings(self) -> None:
        app, linter_runner = _make_app(["fs"])

        runner.invoke(app, ["check", str(Path("a") / "b.py"), "c"])

        paths, _ = linter_runner.run.call_args.args
        assert paths == [str(Path("a") / "b.py"), "c"]


class TestShowConfigCommand:
    """Test the show-config command."""

    def test_lists_modules_sorted(self) -> None:
        app, _ = _make_app(["net", "fs", "fs"])

        result = runner.invoke(app, ["show-config", "-m", "child_process"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["child_process", "fs", "net"]

    def test_verbose_flag_is_accepted(self) -> None:
        app, _ = _make_app(["fs"])

        result = runner.invoke(app, ["--verbose", "show-config"])

        assert result.exit_code == 0
        assert "fs" in result.output
