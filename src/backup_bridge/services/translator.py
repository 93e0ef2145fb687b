"""
Backup configuration translator.

Translates the application's backup declarations into the configuration
object graph of the backup engine.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import ValidationError

from ..config import ConfigurationStore, Settings, get_settings
from ..exceptions import ConfigurationError, UnknownBackupKindError
from ..mappers import (
    BackupKind,
    get_source_mapper,
    map_check,
    map_cleanup,
    map_crypt,
    map_sync,
    map_target,
)
from ..models import BackupDefinition, Configuration
from ..utils import require_mapping

logger = logging.getLogger(__name__)


class BackupTranslator:
    """
    Service translating application backup declarations.

    Each call to translate() reads from the given store only and builds a new
    Configuration, so one translator can serve many stores.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize backup translator.

        Args:
            settings: Translator settings. If None, loads from environment.
        """
        self._settings = settings or get_settings()

    @property
    def settings(self) -> Settings:
        """Get settings instance."""
        return self._settings

    def translate(self, store: ConfigurationStore) -> Configuration:
        """
        Translate all declared backups.

        Args:
            store: Store holding the backup declarations and connections

        Returns:
            Configuration with one backup per declared entry, in declaration order

        Raises:
            TranslationError: On the first invalid entry; nothing is returned
        """
        backups_key = self._settings.backups_key
        declarations = require_mapping(store.get(backups_key), backups_key)
        filename = store.get(self._settings.filename_key)
        if not isinstance(filename, str) or not filename:
            raise ConfigurationError(
                f"Configuration at '{self._settings.filename_key}' must be a non-empty string"
            )

        self._check_declared_kinds(declarations)

        backups = []
        for kind in BackupKind:
            entries = declarations.get(kind.value)
            if entries is None:
                continue
            if not isinstance(entries, (list, tuple)):
                raise ConfigurationError(
                    f"Configuration at '{backups_key}.{kind.value}' must be a list, "
                    f"got {type(entries).__name__}"
                )
            for index, entry in enumerate(entries):
                path = f"{backups_key}.{kind.value}.{index}"
                backups.append(self._translate_entry(kind, entry, path, store))

        configuration = Configuration(filename=filename, backups=tuple(backups))
        logger.info(f"Translated {len(backups)} backups for configuration: {filename}")
        return configuration

    def translate_backup(
        self,
        kind: Union[str, BackupKind],
        block: Mapping[str, Any],
        store: ConfigurationStore,
    ) -> BackupDefinition:
        """
        Translate a single backup entry.

        Args:
            kind: Backup kind, e.g. "directories" or "databases"
            block: Raw backup entry
            store: Store used to resolve database connections

        Returns:
            Translated BackupDefinition

        Raises:
            UnknownBackupKindError: If the kind has no mapper
            TranslationError: If the entry is invalid
        """
        path = kind.value if isinstance(kind, BackupKind) else str(kind)
        return self._translate_entry(kind, block, path, store)

    def _translate_entry(
        self,
        kind: Union[str, BackupKind],
        block: Any,
        path: str,
        store: ConfigurationStore,
    ) -> BackupDefinition:
        mapper = get_source_mapper(kind, store, self._settings)
        block = require_mapping(block, path)

        try:
            name, source = mapper.map(block, path)
            backup = BackupDefinition(
                name=name,
                source=source,
                target=map_target(block, path),
                check=map_check(block, path),
                sync=map_sync(block, path, self._settings.sync_provider),
                cleanup=map_cleanup(block, path),
                crypt=map_crypt(block, path),
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid backup at '{path}': {e}") from e
        logger.debug(f"Translated backup: {backup.name} ({backup.source.type})")
        return backup

    def _check_declared_kinds(self, declarations: Mapping[str, Any]) -> None:
        """Skip or reject declared kinds that have no mapper."""
        known = {kind.value for kind in BackupKind}

        for key, value in declarations.items():
            if key in known:
                continue
            # Only list values declare backups; other keys are plain settings
            if not isinstance(value, (list, tuple)):
                continue
            if self._settings.strict_backup_kinds:
                raise UnknownBackupKindError(key)
            logger.debug(f"Skipping unsupported backup kind: {key}")


def translate(store: ConfigurationStore, settings: Optional[Settings] = None) -> Configuration:
    """Translate a store's backup declarations with a one-off translator."""
    return BackupTranslator(settings).translate(store)
