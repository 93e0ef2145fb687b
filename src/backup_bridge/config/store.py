"""
Key-path-addressable configuration stores.

A store is read-only from the translator's point of view: values are looked
up by dotted path (``"database.connections"``) and never written back.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from ..exceptions import MissingKeyError

MISSING: Any = object()


@runtime_checkable
class ConfigurationStore(Protocol):
    """Anything exposing dotted-path lookups."""

    def get(self, path: str, default: Any = MISSING) -> Any:
        ...

    def has(self, path: str) -> bool:
        ...


class DictConfigurationStore:
    """
    Configuration store backed by a nested mapping.

    Lookups walk the mapping one path segment at a time. A path that stops
    resolving is absent, which differs from a key holding an empty value.
    """

    def __init__(self, data: Mapping[str, Any], separator: str = "."):
        self._data = data
        self._separator = separator

    def get(self, path: str, default: Any = MISSING) -> Any:
        """
        Get the value stored under a dotted path.

        Args:
            path: Dotted key path, e.g. "phpbu.config"
            default: Value returned when the path is absent

        Returns:
            The stored value

        Raises:
            MissingKeyError: If the path is absent and no default was given
        """
        node: Any = self._data
        for segment in path.split(self._separator):
            if not isinstance(node, Mapping) or segment not in node:
                if default is MISSING:
                    raise MissingKeyError(path)
                return default
            node = node[segment]
        return node

    def has(self, path: str) -> bool:
        """Check whether a dotted path resolves to a value."""
        absent = object()
        return self.get(path, default=absent) is not absent
