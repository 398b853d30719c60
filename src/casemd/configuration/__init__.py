"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    ACCESS_TOKEN_ENV_VAR,
    Configuration,
    OutputSettings,
    RemoteSheetsSettings,
)

__all__ = [
    "ACCESS_TOKEN_ENV_VAR",
    "Configuration",
    "OutputSettings",
    "RemoteSheetsSettings",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
