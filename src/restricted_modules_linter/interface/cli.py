"""CLI entry points - Thin Controller using Typer."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import typer

from restricted_modules_linter.domain.config import ConfigurationLoader
from restricted_modules_linter.domain.errors import ConfigurationError
from restricted_modules_linter.domain.restriction_set import RestrictionSet

CONFIG_ERROR_EXIT = 2


class LinterRunnerProtocol(Protocol):
    def run(self, paths: list[str], modules: list[str]) -> int:
        ...


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    linter_runner: LinterRunnerProtocol


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_modules(
        config_loader: ConfigurationLoader, extra: list[str] | None
    ) -> RestrictionSet:
        """Configured modules plus --module values. Raises ConfigurationError."""
        return config_loader.with_modules(list(extra or []))

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="restricted-modules",
            help="Flag require() calls that load restricted modules.",
            add_completion=False,
        )

        @app.callback()
        def main(
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
        ) -> None:
            logging.basicConfig(
                level=logging.DEBUG if verbose else logging.WARNING,
                format="%(levelname)s %(name)s: %(message)s",
            )

        @app.command()
        def check(
            paths: list[Path] = typer.Argument(..., help="Files or packages to lint"),  # noqa: B008
            module: list[str] = typer.Option(  # noqa: B008
                [], "--module", "-m", help="Restricted module name (repeatable)"),
        ) -> None:
            """Run pylint with the restricted-modules checker and exit with pylint's status."""
            try:
                restriction_set = CLIAppFactory.resolve_modules(deps.config_loader, module)
            except ConfigurationError as exc:
                typer.echo(f"Configuration error: {exc}", err=True)
                raise typer.Exit(code=CONFIG_ERROR_EXIT) from exc
            if not restriction_set:
                typer.echo("No restricted modules configured; nothing to check.")
                raise typer.Exit(code=0)
            # pyproject modules are loaded by the plugin; pass only --module extras.
            extras = list(RestrictionSet.from_config(module))
            status = deps.linter_runner.run([str(p) for p in paths], extras)
            raise typer.Exit(code=status)

        @app.command("show-config")
        def show_config(
            module: list[str] = typer.Option(  # noqa: B008
                [], "--module", "-m", help="Extra restricted module name (repeatable)"),
        ) -> None:
            """Print the effective restricted modules, one per line."""
            try:
                restriction_set = CLIAppFactory.resolve_modules(deps.config_loader, module)
            except ConfigurationError as exc:
                typer.echo(f"Configuration error: {exc}", err=True)
                raise typer.Exit(code=CONFIG_ERROR_EXIT) from exc
            for name in restriction_set:
                typer.echo(name)

        return app
