"""Shared fixtures for Backup Bridge tests."""

import pytest

from backup_bridge.config import DictConfigurationStore, Settings


@pytest.fixture
def settings():
    """Settings with default values, independent of the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def connections():
    """Named database connections as an application would declare them."""
    return {
        "mysql": {
            "driver": "mysql",
            "host": "localhost",
            "username": "root",
            "password": "secret",
            "database": "app",
        },
        "reporting": {
            "driver": "pgsql",
            "host": "db1",
            "username": "u",
            "password": "p",
            "database": "reports",
        },
        "postgres": {
            "driver": "postgres",
            "host": "db2",
            "username": "pg",
            "password": "pgpass",
            "database": "analytics",
        },
        "sqlite": {
            "driver": "sqlite",
            "database": "/var/db/app.sqlite",
        },
    }


@pytest.fixture
def make_store(connections):
    """Build a store from backup declarations."""

    def _make_store(directories=None, databases=None, filename="backup.json", **extra):
        phpbu = {"config": filename}
        if directories is not None:
            phpbu["directories"] = directories
        if databases is not None:
            phpbu["databases"] = databases
        phpbu.update(extra)
        return DictConfigurationStore(
            {
                "phpbu": phpbu,
                "database": {"connections": connections},
            }
        )

    return _make_store


@pytest.fixture
def target():
    """A valid target block."""
    return {"dirname": "/backup", "filename": "backup-%d.tar"}
