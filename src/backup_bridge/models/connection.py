"""
Database connection models.

Connections are resolved by name from the framework's connections table and
only read by the translator.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class DatabaseDriver(str, Enum):
    """Database drivers the translator can produce dumps for."""

    MYSQL = "mysql"
    PGSQL = "pgsql"
    POSTGRES = "postgres"


# Driver to engine source type
DRIVER_SOURCE_TYPES = {
    DatabaseDriver.MYSQL: "mysqldump",
    DatabaseDriver.PGSQL: "pgdump",
    DatabaseDriver.POSTGRES: "pgdump",
}

SUPPORTED_DRIVERS = tuple(driver.value for driver in DatabaseDriver)


class DatabaseConnection(BaseModel):
    """A named database connection as declared by the application."""

    model_config = ConfigDict(frozen=True, extra="allow")

    driver: Optional[str] = Field(default=None, description="Connection driver")
    # Values are passed to the dump tool as configured, numbers included
    host: Optional[Any] = Field(default=None)
    username: Optional[Any] = Field(default=None)
    password: Optional[Any] = Field(default=None)
    database: Optional[Any] = Field(default=None, description="Database name")

    @property
    def is_supported(self) -> bool:
        """Check if the driver is one the translator can map."""
        return self.driver in SUPPORTED_DRIVERS

    @property
    def source_type(self) -> str:
        """
        Get the engine source type for this connection's driver.

        Raises:
            ValueError: If the driver is not supported
        """
        return DRIVER_SOURCE_TYPES[DatabaseDriver(self.driver)]

    def to_source_options(self) -> dict:
        """Build default dump options from the connection."""
        return {
            "host": self.host,
            "user": self.username,
            "password": self.password,
            "databases": self.database,
        }
