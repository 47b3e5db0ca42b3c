"""Configuration package with clean public API."""

from .manager import ConfigurationManager, get_config_manager
from .schemas import (
    OUTPUT_FORMATS,
    AppConfig,
    LoggingConfig,
    ReadmeConfig,
    validate_config,
)

__all__ = [
    # Main configuration
    'AppConfig',
    'validate_config',

    # Specific configurations
    'LoggingConfig',
    'ReadmeConfig',
    'OUTPUT_FORMATS',

    # Configuration management
    'ConfigurationManager',
    'get_config_manager',
]
