"""Custom exceptions for Backup Bridge."""

from typing import Optional


class BackupBridgeError(Exception):
    """Base exception for all Backup Bridge errors."""

    pass


class ConfigurationError(BackupBridgeError):
    """Error in configuration."""

    pass


class TranslationError(ConfigurationError):
    """Base error for a failed configuration translation."""

    pass


class MissingKeyError(TranslationError):
    """A required key path is absent."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        super().__init__(message or f"Missing required configuration key: '{path}'")


class UnknownConnectionError(TranslationError):
    """Referenced database connection is not configured."""

    def __init__(self, connection: str):
        self.connection = connection
        super().__init__(f"Unknown database connection: '{connection}'")


class UnsupportedDriverError(TranslationError):
    """Database driver is not in the supported allow-list."""

    def __init__(self, connection: str, driver: Optional[str], supported: tuple[str, ...] = ()):
        self.connection = connection
        self.driver = driver
        self.supported = supported
        message = f"Unsupported database driver '{driver}' for connection '{connection}'"
        if supported:
            message += f" (supported: {', '.join(supported)})"
        super().__init__(message)


class InvalidTargetError(TranslationError):
    """Target block lacks a required field."""

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"Invalid target: '{field}' has to be configured")


class UnknownBackupKindError(TranslationError):
    """Backup kind has no registered mapper."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unknown backup kind: '{kind}'")


__all__ = [
    "BackupBridgeError",
    "ConfigurationError",
    "TranslationError",
    "MissingKeyError",
    "UnknownConnectionError",
    "UnsupportedDriverError",
    "InvalidTargetError",
    "UnknownBackupKindError",
]
