"""Errors raised while setting up rules. Shape mismatches on nodes are never errors."""


class ConfigurationError(ValueError):
    """Restricted-module configuration is malformed. Fatal before any traversal starts."""
