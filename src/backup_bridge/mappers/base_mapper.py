"""
Base source mapper defining the interface for all backup kind mappers.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Tuple

from ..config import ConfigurationStore, Settings
from ..models import Source
from ..utils import require_key, require_mapping

logger = logging.getLogger(__name__)


class BaseSourceMapper(ABC):
    """
    Abstract base class for backup kind mappers.

    A mapper turns the ``source`` block of one raw backup entry into the
    backup name and its engine Source.
    """

    def __init__(self, store: ConfigurationStore, settings: Settings):
        """
        Initialize the mapper.

        Args:
            store: Store the translation reads from
            settings: Translator settings
        """
        self._store = store
        self._settings = settings

    @property
    @abstractmethod
    def kind(self) -> str:
        """Return the backup kind this mapper handles."""
        pass

    @abstractmethod
    def _map_source(self, source: Mapping[str, Any], path: str) -> Tuple[str, Source]:
        """
        Map a validated source block.

        Args:
            source: The entry's source block
            path: Dotted path of the source block, used in error messages

        Returns:
            Tuple of (backup name, Source)
        """
        pass

    def map(self, block: Mapping[str, Any], path: str) -> Tuple[str, Source]:
        """
        Map a raw backup entry to its name and Source.

        Args:
            block: Raw backup entry
            path: Dotted path of the entry, used in error messages

        Returns:
            Tuple of (backup name, Source)

        Raises:
            TranslationError: If the source block is invalid
        """
        source_path = f"{path}.source"
        source = require_mapping(require_key(block, "source", path), source_path)
        name, mapped = self._map_source(source, source_path)
        logger.debug(f"Mapped {self.kind} source '{name}' as {mapped.type}")
        return name, mapped

    @staticmethod
    def _caller_options(source: Mapping[str, Any], path: str) -> Mapping[str, Any]:
        """Get the optional caller supplied options of a source block."""
        options = source.get("options")
        if options is None:
            return {}
        return require_mapping(options, f"{path}.options")
