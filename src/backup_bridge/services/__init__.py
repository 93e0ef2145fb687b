"""Services for Backup Bridge."""

from .translator import BackupTranslator, translate

__all__ = [
    "BackupTranslator",
    "translate",
]
