"""Tests for backup definition models."""

import pydantic
import pytest

from backup_bridge.models import (
    BackupDefinition,
    Check,
    Cleanup,
    Configuration,
    DatabaseConnection,
    Source,
    Sync,
    Target,
)


@pytest.fixture
def backup():
    return BackupDefinition(
        name="/var/www",
        source=Source(type="archive", options={"path": "/var/www"}),
        target=Target(dirname="/backup", filename="www-%Y%m%d.tar", compression="gzip"),
        check=Check(type="SizeMin", value="1M"),
        sync=Sync(type="laravel-storage", options={"filesystem": "s3", "path": "www"}),
        cleanup=Cleanup(type="Quantity", options={"amount": 3}),
    )


class TestBackupDefinition:
    """Test BackupDefinition model."""

    def test_is_frozen(self, backup):
        with pytest.raises(pydantic.ValidationError):
            backup.name = "other"

    def test_options_are_read_only(self, backup):
        with pytest.raises(TypeError):
            backup.source.options["path"] = "/tmp"
        assert backup.source.options == {"path": "/var/www"}

    def test_options_copied_from_input(self):
        options = {"exclude": ["cache"]}
        source = Source(type="archive", options=options)
        options["exclude"].append("logs")
        assert source.model_dump() == {"type": "archive", "options": {"exclude": ["cache"]}}

    def test_optional_steps_default_to_none(self):
        minimal = BackupDefinition(
            name="n",
            source=Source(type="archive"),
            target=Target(dirname="/d", filename="f"),
        )
        assert minimal.check is None
        assert minimal.sync is None
        assert minimal.cleanup is None
        assert minimal.crypt is None
        assert minimal.stop_on_failure is False

    def test_to_dict(self, backup):
        data = backup.to_dict()

        assert data["name"] == "/var/www"
        assert data["stopOnFailure"] is False
        assert data["source"] == {"type": "archive", "options": {"path": "/var/www"}}
        assert data["target"] == {
            "dirname": "/backup",
            "filename": "www-%Y%m%d.tar",
            "compress": "gzip",
        }
        assert data["checks"] == [{"type": "SizeMin", "value": "1M"}]
        assert data["syncs"] == [
            {
                "type": "laravel-storage",
                "skipOnFailure": False,
                "options": {"filesystem": "s3", "path": "www"},
            }
        ]
        assert data["cleanup"]["type"] == "Quantity"
        assert "crypt" not in data


class TestConfiguration:
    """Test Configuration aggregate."""

    def test_get_backup(self, backup):
        configuration = Configuration(filename="backup.json", backups=(backup,))
        assert configuration.get_backup("/var/www") == backup
        with pytest.raises(KeyError):
            configuration.get_backup("missing")

    def test_to_dict(self, backup):
        configuration = Configuration(filename="backup.json", backups=(backup,))
        data = configuration.to_dict()
        assert data["filename"] == "backup.json"
        assert [b["name"] for b in data["backups"]] == ["/var/www"]

    def test_empty_configuration_is_truthy(self):
        """Test that a translation without backups still reads as a result."""
        configuration = Configuration(filename="backup.json")
        assert configuration
        assert configuration.backups == ()

    def test_structural_equality(self, backup):
        assert Configuration(filename="a", backups=(backup,)) == Configuration(
            filename="a", backups=(backup,)
        )


class TestDatabaseConnection:
    """Test DatabaseConnection model."""

    @pytest.mark.parametrize(
        "driver,source_type",
        [("mysql", "mysqldump"), ("pgsql", "pgdump"), ("postgres", "pgdump")],
    )
    def test_source_type(self, driver, source_type):
        connection = DatabaseConnection(driver=driver)
        assert connection.is_supported is True
        assert connection.source_type == source_type

    @pytest.mark.parametrize("driver", ["sqlite", "sqlsrv", None])
    def test_unsupported(self, driver):
        assert DatabaseConnection(driver=driver).is_supported is False

    def test_extra_keys_allowed(self):
        connection = DatabaseConnection(driver="mysql", port="3306", charset="utf8mb4")
        assert connection.to_source_options() == {
            "host": None,
            "user": None,
            "password": None,
            "databases": None,
        }
