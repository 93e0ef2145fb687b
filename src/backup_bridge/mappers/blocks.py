"""
Mappers for the per-backup target, check, sync, cleanup and crypt blocks.
"""

from collections.abc import Mapping
from typing import Any, Optional

from ..exceptions import InvalidTargetError
from ..models import Check, Cleanup, Crypt, Sync, Target
from ..utils import is_blank, require_key, require_mapping, validate_required_fields


def map_target(block: Mapping[str, Any], path: str) -> Target:
    """
    Map the mandatory target block.

    Raises:
        InvalidTargetError: If the block, its dirname or its filename is missing
    """
    if "target" not in block:
        raise InvalidTargetError("target", "Invalid target: target has to be configured")

    target = require_mapping(block["target"], f"{path}.target")
    is_valid, missing = validate_required_fields(target, ("dirname", "filename"))
    if not is_valid:
        raise InvalidTargetError(missing)

    compression = target.get("compression")
    return Target(
        dirname=target["dirname"],
        filename=target["filename"],
        compression=None if is_blank(compression) else compression,
    )


def map_check(block: Mapping[str, Any], path: str) -> Optional[Check]:
    """Map the check block if configured."""
    if block.get("check") is None:
        return None

    check_path = f"{path}.check"
    check = require_mapping(block["check"], check_path)
    return Check(
        type=require_key(check, "type", check_path),
        value=require_key(check, "value", check_path),
    )


def map_sync(block: Mapping[str, Any], path: str, provider: str) -> Optional[Sync]:
    """Map the sync block if configured, tagging it with the storage provider."""
    if block.get("sync") is None:
        return None

    sync_path = f"{path}.sync"
    sync = require_mapping(block["sync"], sync_path)
    return Sync(
        type=provider,
        options={
            "filesystem": require_key(sync, "filesystem", sync_path),
            "path": require_key(sync, "path", sync_path),
        },
    )


def map_cleanup(block: Mapping[str, Any], path: str) -> Optional[Cleanup]:
    """Map the cleanup block if configured."""
    if block.get("cleanup") is None:
        return None

    cleanup_path = f"{path}.cleanup"
    cleanup = require_mapping(block["cleanup"], cleanup_path)
    return Cleanup(
        type=require_key(cleanup, "type", cleanup_path),
        options=_pass_through_options(cleanup, cleanup_path),
    )


def map_crypt(block: Mapping[str, Any], path: str) -> Optional[Crypt]:
    """Map the crypt block if configured."""
    if block.get("crypt") is None:
        return None

    crypt_path = f"{path}.crypt"
    crypt = require_mapping(block["crypt"], crypt_path)
    return Crypt(
        type=require_key(crypt, "type", crypt_path),
        options=_pass_through_options(crypt, crypt_path),
    )


def _pass_through_options(block: Mapping[str, Any], path: str) -> dict:
    options = block.get("options")
    if options is None:
        return {}
    return dict(require_mapping(options, f"{path}.options"))
