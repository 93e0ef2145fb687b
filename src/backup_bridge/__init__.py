"""
Backup Bridge

Translates an application's backup declarations (directories, databases,
targets, checks, syncs, cleanups, encryption) into the configuration object
graph of a backup engine.

Modules:
- config: Settings and key-path configuration stores
- models: Backup definitions and the configuration aggregate
- mappers: Source mappers per backup kind and sub-block mappers
- services: The translator
- utils: Validators and option merging
- exceptions: Custom exceptions
"""

from .config import DictConfigurationStore, Settings
from .models import Configuration
from .services import BackupTranslator, translate

__version__ = "0.1.0"

__all__ = [
    "BackupTranslator",
    "Configuration",
    "DictConfigurationStore",
    "Settings",
    "translate",
]
