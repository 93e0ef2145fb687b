"""
Database mapper producing dump sources.

Resolves the named connection from the store and maps its driver to the
matching dump tool.
"""

import logging
from collections.abc import Mapping
from typing import Any, Tuple

from pydantic import ValidationError

from ..exceptions import (
    ConfigurationError,
    MissingKeyError,
    UnknownConnectionError,
    UnsupportedDriverError,
)
from ..models import SUPPORTED_DRIVERS, DatabaseConnection, Source
from ..utils import is_blank, merge_options
from .base_mapper import BaseSourceMapper

logger = logging.getLogger(__name__)


class DatabaseMapper(BaseSourceMapper):
    """
    Mapper for database backups.

    Produces mysqldump or pgdump sources named ``db-<connection>``.
    """

    @property
    def kind(self) -> str:
        return "databases"

    def _map_source(self, source: Mapping[str, Any], path: str) -> Tuple[str, Source]:
        name = source.get("connection")
        if is_blank(name):
            raise MissingKeyError(f"{path}.connection")

        connection = self.get_connection(str(name))
        options = merge_options(
            connection.to_source_options(), self._caller_options(source, path)
        )
        return f"db-{name}", Source(type=connection.source_type, options=options)

    def get_connection(self, name: str) -> DatabaseConnection:
        """
        Get a supported database connection by name.

        Args:
            name: Connection name

        Returns:
            The resolved DatabaseConnection

        Raises:
            UnknownConnectionError: If the connection is not configured
            UnsupportedDriverError: If the connection's driver is not supported
        """
        connections = self._store.get(self._settings.connections_key, default=None)
        if not isinstance(connections, Mapping) or name not in connections:
            logger.warning(f"Database connection not found: {name}")
            raise UnknownConnectionError(name)

        raw = connections[name]
        if not isinstance(raw, Mapping):
            raise ConfigurationError(f"Database connection '{name}' must be a mapping")

        driver = raw.get("driver")
        if driver not in SUPPORTED_DRIVERS:
            logger.warning(f"Database connection '{name}' uses unsupported driver: {driver}")
            raise UnsupportedDriverError(name, driver, SUPPORTED_DRIVERS)

        try:
            return DatabaseConnection.model_validate(dict(raw))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid database connection '{name}': {e}") from e
