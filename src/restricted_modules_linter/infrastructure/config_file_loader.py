"""Load [tool.restricted-modules] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path

from restricted_modules_linter.domain.constants import CONFIG_SECTION
from restricted_modules_linter.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml at or above a start directory."""

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Return the [tool.restricted-modules] table, empty when no pyproject.toml is found."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.is_file():
                continue
            try:
                with config_file.open("rb") as f:
                    data = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigurationError(f"{config_file}: {exc}") from exc
            except OSError:
                logger.warning("Could not read %s", config_file)
                continue
            tool_section = data.get("tool", {}) or {}
            config_dict = tool_section.get(CONFIG_SECTION, {}) or {}
            if not isinstance(config_dict, dict):
                raise ConfigurationError(
                    f"{config_file}: [tool.{CONFIG_SECTION}] must be a table"
                )
            logger.debug("Loaded configuration from %s", config_file)
            return config_dict
        return {}
