"""
sockets.py
--------------------
Socket-type registry: maps a connector type id (bnc, hdmi, …) to the colour
and label used when drawing its stem.

The table is plain configuration. New connector types are added by passing
a mapping or a JSON file, never by touching the layout code.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .constants import DEFAULT_SOCKET_TYPES
from .exceptions import SocketRegistryError, UnknownSocketType
from .models import SocketType


class SocketRegistry:
    """Read-only lookup of socket types by id."""

    def __init__(self, types: Mapping[str, SocketType]) -> None:
        self._types: dict[str, SocketType] = dict(types)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> SocketRegistry:
        """Build a registry from raw ``{id: {colour, label}}`` data."""
        types: dict[str, SocketType] = {}
        for type_id, raw in mapping.items():
            if isinstance(raw, SocketType):
                types[type_id] = raw
                continue
            try:
                types[type_id] = SocketType.model_validate(raw)
            except ValidationError as exc:
                raise SocketRegistryError(
                    f"Invalid socket type {type_id!r}: {exc.errors()[0]['msg']}"
                ) from exc
        return cls(types)

    @classmethod
    def default(cls) -> SocketRegistry:
        """Registry holding the built-in connector table."""
        return cls.from_mapping(DEFAULT_SOCKET_TYPES)

    @classmethod
    def from_file(
        cls, path: Path | str, base: SocketRegistry | None = None
    ) -> SocketRegistry:
        """
        Load socket types from a JSON object and merge them over ``base``.

        Args:
            path: JSON file of ``{id: {"colour": "#RRGGBB", "label": "..."}}``
            base: Registry to extend (default: the built-in table)
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise SocketRegistryError(f"Cannot read socket types from {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise SocketRegistryError(f"{path}: expected a JSON object of socket types")
        if base is None:
            base = cls.default()
        return base.merged(data)

    def merged(self, mapping: Mapping[str, Any]) -> SocketRegistry:
        """Return a new registry with ``mapping`` added over this one."""
        extra = SocketRegistry.from_mapping(mapping)
        return SocketRegistry({**self._types, **extra._types})

    def lookup(self, type_id: str, socket_name: str | None = None) -> SocketType:
        """Return the socket type for ``type_id`` or raise UnknownSocketType."""
        try:
            return self._types[type_id]
        except KeyError:
            raise UnknownSocketType(type_id, socket_name) from None

    def type_ids(self) -> list[str]:
        return list(self._types)

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)
