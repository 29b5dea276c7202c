"""Bucketed hash table mapping entity keys to component indices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tinyfield.entities import BUCKET_SIZE, LIST_SIZE, EntityKey


@dataclass
class _Entry:
    key: EntityKey
    component_index: int


class ECHashList:
    """Fixed number of fixed-size buckets, hashed by key index.

    An entry that does not fit in its home bucket is placed in the next
    bucket with room, but lookups only search the home bucket.
    """

    def __init__(self, list_size: int = LIST_SIZE, bucket_size: int = BUCKET_SIZE) -> None:
        self.list_size = list_size
        self.bucket_size = bucket_size
        self._buckets: list[list[_Entry]] = [[] for _ in range(list_size)]

    def _home(self, key: EntityKey) -> int:
        return key.index % self.list_size

    def _find(self, key: EntityKey) -> Optional[_Entry]:
        return next(
            (entry for entry in self._buckets[self._home(key)] if entry.key == key),
            None,
        )

    def register(self, key: EntityKey, component_index: int) -> None:
        """Map ``key`` to ``component_index``, updating an existing entry."""
        existing = self._find(key)
        if existing is not None:
            existing.component_index = component_index
            return
        home = self._home(key)
        for offset in range(self.list_size):
            bucket = self._buckets[(home + offset) % self.list_size]
            if len(bucket) < self.bucket_size:
                bucket.append(_Entry(key, component_index))
                return
        raise RuntimeError("hash list is full")

    def change(self, key: EntityKey, component_index: int) -> None:
        entry = self._find(key)
        if entry is None:
            raise KeyError(f"no entry to change for index {key.index}")
        entry.component_index = component_index

    def __contains__(self, key: object) -> bool:
        return isinstance(key, EntityKey) and self._find(key) is not None

    def index_of(self, key: EntityKey) -> int:
        entry = self._find(key)
        if entry is None:
            raise KeyError(f"no component for index {key.index}")
        return entry.component_index

    def get(self, key: EntityKey, default: Optional[int] = None) -> Optional[int]:
        entry = self._find(key)
        return default if entry is None else entry.component_index

    def describe(self, key: EntityKey) -> str:
        """Human-readable summary of the entry for ``key``."""
        entry = self._find(key)
        if entry is None:
            raise KeyError(f"no entry for index {key.index}")
        return (
            f"ent_key_index {entry.key.index}\n"
            f"component index {entry.component_index}"
        )