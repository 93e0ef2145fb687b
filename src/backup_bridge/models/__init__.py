"""Data models for Backup Bridge."""

from .backup import BackupDefinition, Check, Cleanup, Crypt, Source, Sync, Target
from .configuration import Configuration
from .connection import (
    DRIVER_SOURCE_TYPES,
    SUPPORTED_DRIVERS,
    DatabaseConnection,
    DatabaseDriver,
)

__all__ = [
    # Backup
    "BackupDefinition",
    "Source",
    "Target",
    "Check",
    "Sync",
    "Cleanup",
    "Crypt",
    # Configuration
    "Configuration",
    # Connection
    "DatabaseConnection",
    "DatabaseDriver",
    "DRIVER_SOURCE_TYPES",
    "SUPPORTED_DRIVERS",
]
