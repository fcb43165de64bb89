from typing import Any, Optional, cast

from restricted_modules_linter.domain.config import ConfigurationLoader
from restricted_modules_linter.infrastructure.config_file_loader import ConfigFileLoader
from restricted_modules_linter.infrastructure.gateways.astroid_gateway import AstroidGateway


class RestrictedModulesContainer:
    """Dependency Injection Container for the restricted-modules linter."""

    _instance: Optional["RestrictedModulesContainer"] = None

    def __init__(self, config_loader: ConfigurationLoader | None = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_loader)

    @classmethod
    def get_instance(cls) -> "RestrictedModulesContainer":
        """Process-wide container used by the pylint plugin entry point."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None

    def _register_defaults(self, config_loader: ConfigurationLoader | None) -> None:
        """Register default implementations for protocols."""
        if config_loader is None:
            config_loader = ConfigurationLoader(ConfigFileLoader.load_config_from_fs())
        self.register_singleton("ConfigurationLoader", config_loader)
        self.register_singleton("AstroidGateway", AstroidGateway())

    def register_singleton(self, key: str, instance: object) -> None:
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        if key not in self._singletons:
            raise KeyError(f"No singleton registered for {key!r}")
        return self._singletons[key]

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_astroid_gateway(self) -> AstroidGateway:
        return cast(AstroidGateway, self.get("AstroidGateway"))
