"""Configuration module for pii-processors."""

from pii_processors.config.settings import (
    ProcessorSettings,
    load_settings_from_yaml,
    load_settings_from_yaml_safe,
)

__all__ = [
    "ProcessorSettings",
    "load_settings_from_yaml",
    "load_settings_from_yaml_safe",
]
