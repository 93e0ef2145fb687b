"""
Mappers for the supported backup kinds and their sub-blocks.

Each backup kind has one source mapper; kinds are translated in the order
they are declared in BackupKind.
"""

from enum import Enum
from typing import Union

from ..config import ConfigurationStore, Settings
from ..exceptions import UnknownBackupKindError
from .base_mapper import BaseSourceMapper
from .blocks import map_check, map_cleanup, map_crypt, map_sync, map_target
from .database_mapper import DatabaseMapper
from .directory_mapper import DirectoryMapper


class BackupKind(str, Enum):
    """Backup kinds, in translation order."""

    DIRECTORIES = "directories"
    DATABASES = "databases"


def get_source_mapper(
    kind: Union[str, BackupKind], store: ConfigurationStore, settings: Settings
) -> BaseSourceMapper:
    """
    Get the source mapper for a backup kind.

    Args:
        kind: Backup kind
        store: Store the translation reads from
        settings: Translator settings

    Returns:
        Source mapper instance

    Raises:
        UnknownBackupKindError: If the kind has no mapper
    """
    mappers = {
        BackupKind.DIRECTORIES: DirectoryMapper,
        BackupKind.DATABASES: DatabaseMapper,
    }

    try:
        mapper_class = mappers[BackupKind(kind)]
    except ValueError:
        raise UnknownBackupKindError(str(kind)) from None

    return mapper_class(store, settings)


__all__ = [
    "BackupKind",
    "BaseSourceMapper",
    "DirectoryMapper",
    "DatabaseMapper",
    "get_source_mapper",
    "map_target",
    "map_check",
    "map_sync",
    "map_cleanup",
    "map_crypt",
]
