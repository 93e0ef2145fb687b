"""Configuration module for Backup Bridge."""

from .settings import Settings, get_settings
from .store import MISSING, ConfigurationStore, DictConfigurationStore

__all__ = [
    "Settings",
    "get_settings",
    "MISSING",
    "ConfigurationStore",
    "DictConfigurationStore",
]
