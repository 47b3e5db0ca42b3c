"""Configuration schemas."""

from .app_schema import OUTPUT_FORMATS, AppConfig, validate_config
from .logging_schema import LoggingConfig
from .readme_schema import ReadmeConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "OUTPUT_FORMATS",
    "ReadmeConfig",
    "validate_config",
]
