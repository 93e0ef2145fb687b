"""Translated configuration aggregate."""

from pydantic import BaseModel, ConfigDict, Field

from .backup import BackupDefinition


class Configuration(BaseModel):
    """
    Backup engine configuration produced by one translation.

    Backups keep their declaration order so output is deterministic.
    """

    model_config = ConfigDict(frozen=True)

    filename: str = Field(..., description="Identifier of the engine configuration")
    backups: tuple[BackupDefinition, ...] = Field(default=())

    def get_backup(self, name: str) -> BackupDefinition:
        """
        Get a backup definition by name.

        Raises:
            KeyError: If no backup has that name
        """
        for backup in self.backups:
            if backup.name == name:
                return backup
        raise KeyError(name)

    def to_dict(self) -> dict:
        """Convert to the engine's plain-dict format."""
        return {
            "filename": self.filename,
            "backups": [backup.to_dict() for backup in self.backups],
        }
