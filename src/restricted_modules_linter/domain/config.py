"""Configuration loader for linter settings. Immutable value object created by Infrastructure."""

from __future__ import annotations

from restricted_modules_linter.domain.restriction_set import RestrictionSet


class ConfigurationLoader:
    """
    Immutable configuration for the restricted-modules rule.

    Created by Infrastructure from the [tool.restricted-modules] table. Domain does
    not read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at composition root.
    Malformed values raise ConfigurationError here, before any checker runs.
    """

    def __init__(self, config_dict: dict[str, object]) -> None:
        """Validate once at construction. No mutable state after init."""
        self._restricted_modules = RestrictionSet.from_config(config_dict.get("modules"))

    @property
    def restricted_modules(self) -> RestrictionSet:
        """Validated restricted module names from pyproject.toml (may be empty)."""
        return self._restricted_modules

    def with_modules(self, extra: object) -> RestrictionSet:
        """Union of configured modules and extra raw values (e.g. a pylint csv option)."""
        return self._restricted_modules.union(RestrictionSet.from_config(extra))
