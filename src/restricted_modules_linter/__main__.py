"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import sys

import typer

from restricted_modules_linter.domain.errors import ConfigurationError
from restricted_modules_linter.infrastructure.adapters.pylint_runner import PylintRunner
from restricted_modules_linter.infrastructure.di.container import RestrictedModulesContainer
from restricted_modules_linter.interface.cli import (
    CONFIG_ERROR_EXIT,
    CLIAppFactory,
    CLIDependencies,
)


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    try:
        container = RestrictedModulesContainer.get_instance()
    except ConfigurationError as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        sys.exit(CONFIG_ERROR_EXIT)

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        linter_runner=PylintRunner(),
    )
    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
