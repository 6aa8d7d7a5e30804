"""Key/value container used to pass context into query definitions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dialect_expression.exceptions import MissingKeyError


class Container:
    """Mapping of string keys to arbitrary values.

    Setting an existing key overwrites it.  Mutators return ``self`` so calls
    can be chained::

        container.set("limit", 10).set("status", "active").remove("page")
    """

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._items: dict[str, Any] = {}
        for name, value in (initial or {}).items():
            self.set(name, value)

    def set(self, name: str, value: Any) -> Container:
        self._items[name] = value
        return self

    def get(self, name: str) -> Any:
        """Return the value bound to *name*.

        Raises:
            MissingKeyError: If *name* has not been set.
        """
        if not self.has(name):
            raise MissingKeyError(name)
        return self._items[name]

    def has(self, name: str) -> bool:
        return name in self._items

    def remove(self, name: str) -> Container:
        """Remove *name* if present.  Removing an absent key is a no-op."""
        self._items.pop(name, None)
        return self

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __len__(self) -> int:
        return len(self._items)
