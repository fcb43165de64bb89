"""Rule codes and message templates."""

CONFIG_SECTION = "restricted-modules"

LOADER_NAME = "require"

RESTRICTED_MODULE_CODE = "W9501"
RESTRICTED_MODULE_SYMBOL = "restricted-module"
RESTRICTED_MODULE_TEMPLATE = "'%s' module is restricted from being used."
RESTRICTED_MODULE_DESCRIPTION = "Disallow specified modules when loaded by `require`."
