"""Configuration module for the assets provider."""

from .configuration import Configuration, load_configuration
from .settings import Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Application configuration
    "Configuration",
    "load_configuration",
]
