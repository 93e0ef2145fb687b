"""
Backup definition models.

Defines the records handed to the backup engine for a single backup: what to
back up (source), where to write it (target) and the optional check, sync,
cleanup and crypt steps.
"""

import copy
from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer


def freeze_options(value: Any) -> Any:
    """
    Copy an option value into a read-only form.

    Mappings become read-only mapping proxies and lists become tuples, so
    options can change neither through the model nor through the caller's data.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_options(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_options(item) for item in value)
    return copy.deepcopy(value)


def thaw_options(value: Any) -> Any:
    """Convert frozen options back into plain dicts and lists."""
    if isinstance(value, Mapping):
        return {key: thaw_options(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw_options(item) for item in value]
    return value


# Read-only option mapping, serialized back to plain dicts
Options = Annotated[
    dict[str, Any],
    AfterValidator(freeze_options),
    PlainSerializer(thaw_options),
]


class Source(BaseModel):
    """What a backup captures and how."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Source type, e.g. archive, mysqldump, pgdump")
    options: Options = Field(
        default_factory=dict, validate_default=True, description="Source options"
    )


class Target(BaseModel):
    """Where a backup artifact is written."""

    model_config = ConfigDict(frozen=True)

    dirname: str = Field(..., min_length=1, description="Target directory")
    filename: str = Field(..., min_length=1, description="Target file name pattern")
    compression: Optional[str] = Field(
        default=None,
        description="Compression to apply, None for no compression",
    )


class Check(BaseModel):
    """Integrity check run against a finished backup."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Check type, legality is up to the engine")
    value: Any = Field(..., description="Check threshold or argument")


class Sync(BaseModel):
    """Remote copy of a finished backup."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Sync provider")
    options: Options = Field(default_factory=dict, validate_default=True)
    skip_on_failure: bool = Field(default=False)


class Cleanup(BaseModel):
    """Retention policy applied after a backup."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Cleanup strategy")
    options: Options = Field(default_factory=dict, validate_default=True)
    skip_on_failure: bool = Field(default=False)


class Crypt(BaseModel):
    """Encryption applied to a backup artifact."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Encryption method")
    options: Options = Field(default_factory=dict, validate_default=True)
    skip_on_failure: bool = Field(default=False)


class BackupDefinition(BaseModel):
    """
    A single translated backup.

    Every definition has exactly one source and one target; the remaining
    steps are optional and None when not configured.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Backup name")
    source: Source
    target: Target
    check: Optional[Check] = None
    sync: Optional[Sync] = None
    cleanup: Optional[Cleanup] = None
    crypt: Optional[Crypt] = None
    stop_on_failure: bool = Field(
        default=False,
        description="Whether the engine aborts remaining backups when this one fails",
    )

    def to_dict(self) -> dict:
        """Convert to the engine's plain-dict format, omitting unset steps."""
        data = {
            "name": self.name,
            "stopOnFailure": self.stop_on_failure,
            "source": {
                "type": self.source.type,
                "options": thaw_options(self.source.options),
            },
            "target": {
                "dirname": self.target.dirname,
                "filename": self.target.filename,
                "compress": self.target.compression,
            },
        }
        if self.check:
            data["checks"] = [{"type": self.check.type, "value": self.check.value}]
        if self.sync:
            data["syncs"] = [_step_to_dict(self.sync)]
        if self.cleanup:
            data["cleanup"] = _step_to_dict(self.cleanup)
        if self.crypt:
            data["crypt"] = _step_to_dict(self.crypt)
        return data


def _step_to_dict(step: "Sync | Cleanup | Crypt") -> dict:
    return {
        "type": step.type,
        "skipOnFailure": step.skip_on_failure,
        "options": thaw_options(step.options),
    }
