"""Bounded per-frame queue of collisions between entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from tinyfield.entities import EntityKey

COLLISION_QUEUE_SIZE = 20


@dataclass(frozen=True)
class Collision:
    first: EntityKey
    second: EntityKey


class QueueFullError(Exception):
    """Raised when a bounded queue has no room left."""


class CollisionQueue:
    """Fixed-capacity list of collisions, cleared every frame."""

    def __init__(self, capacity: int = COLLISION_QUEUE_SIZE) -> None:
        self.capacity = capacity
        self._items: list[Collision] = []

    def add(self, first: EntityKey, second: EntityKey) -> int:
        """Append a collision and return its position in the queue."""
        if len(self._items) >= self.capacity:
            raise QueueFullError("collision queue is full")
        self._items.append(Collision(first, second))
        return len(self._items) - 1

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Collision]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> Collision:
        return self._items[index]