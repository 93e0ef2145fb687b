"""
Directory mapper producing archive sources.
"""

from collections.abc import Mapping
from typing import Any, Tuple

from ..exceptions import MissingKeyError
from ..models import Source
from ..utils import is_blank, merge_options
from .base_mapper import BaseSourceMapper

ARCHIVE_SOURCE_TYPE = "archive"


class DirectoryMapper(BaseSourceMapper):
    """
    Mapper for directory backups.

    The directory is archived; the backup is named after its path.
    """

    @property
    def kind(self) -> str:
        return "directories"

    def _map_source(self, source: Mapping[str, Any], path: str) -> Tuple[str, Source]:
        directory = source.get("path")
        if is_blank(directory):
            raise MissingKeyError(f"{path}.path")

        options = merge_options({"path": directory}, self._caller_options(source, path))
        return str(directory), Source(type=ARCHIVE_SOURCE_TYPE, options=options)
