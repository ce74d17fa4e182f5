"""Transactional key-value storage for contract state.

Contracts declare named maps and data variables up front. Stored values are
expected to be immutable (frozen records, tuples, ints, strings), so a
snapshot only needs to copy the top-level dictionaries.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class DataMap(Generic[K, V]):
    """Named map of keys to immutable values."""

    def __init__(self, name: str):
        self.name = name
        self._entries: dict[K, V] = {}

    def get(self, key: K) -> V | None:
        return self._entries.get(key)

    def contains(self, key: K) -> bool:
        return key in self._entries

    def set(self, key: K, value: V) -> None:
        self._entries[key] = value

    def insert(self, key: K, value: V) -> bool:
        """Store value only when key is absent; return whether it was stored."""
        if key in self._entries:
            return False
        self._entries[key] = value
        return True

    def __len__(self) -> int:
        return len(self._entries)


class DataVar(Generic[V]):
    """Single named value."""

    def __init__(self, name: str, initial: V):
        self.name = name
        self._value = initial

    def get(self) -> V:
        return self._value

    def set(self, value: V) -> None:
        self._value = value


class Store:
    """Registry of data maps and variables with snapshot/restore support."""

    def __init__(self) -> None:
        self._maps: dict[str, DataMap[Any, Any]] = {}
        self._vars: dict[str, DataVar[Any]] = {}

    def define_map(self, name: str) -> DataMap[Any, Any]:
        if name in self._maps or name in self._vars:
            raise ValueError(f"Storage name already defined: {name!r}")
        data_map: DataMap[Any, Any] = DataMap(name)
        self._maps[name] = data_map
        return data_map

    def define_var(self, name: str, initial: Any) -> DataVar[Any]:
        if name in self._maps or name in self._vars:
            raise ValueError(f"Storage name already defined: {name!r}")
        data_var: DataVar[Any] = DataVar(name, initial)
        self._vars[name] = data_var
        return data_var

    def snapshot(self) -> dict[str, dict[str, Any]]:
        return {
            "maps": {name: dict(data_map._entries) for name, data_map in self._maps.items()},
            "vars": {name: data_var.get() for name, data_var in self._vars.items()},
        }

    def restore(self, snapshot: dict[str, dict[str, Any]]) -> None:
        for name, entries in snapshot["maps"].items():
            self._maps[name]._entries = dict(entries)
        for name, value in snapshot["vars"].items():
            self._vars[name].set(value)
