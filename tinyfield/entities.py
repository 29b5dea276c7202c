"""Entity storage: every component lives directly on the entity record."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, Optional

LIST_SIZE = 50
BUCKET_SIZE = 10
MAX_ENTITIES = LIST_SIZE * BUCKET_SIZE

IS_DRAWABLE_MASK = 0b00000000000000000000000000000010
IS_MOVABLE_MASK = 0b00000000000000000000000000000100
IS_PLAYER_MASK = 0b00000000000000000000000000001000
HAS_ANIMATION_MASK = 0b00000000000000000000000000010000
IS_DAMAGE_MASK = 0b00000000000000000000000000100000
HAS_COLLIDER_MASK = 0b00000000000000000000000001000000

EMPTY_INDEX = -1


@dataclass(frozen=True)
class EntityKey:
    """Handle to an entity slot, guarded by a generation counter."""

    index: int
    generation: int


class Direction(IntEnum):
    IDLE = 0
    NW = 1
    N = 2
    NE = 3
    W = 4
    E = 5
    SW = 6
    S = 7
    SE = 8


@dataclass
class Vec2:
    x: int = 0
    y: int = 0


@dataclass
class Bounds:
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


@dataclass
class SpriteSource:
    texture: int = 0
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


@dataclass
class AnimationState:
    resource_index: int = 0
    current_frame: int = 0
    frame_timer: float = 0.0


@dataclass
class Entity:
    """One entity slot with all of its component data."""

    key: EntityKey = field(default_factory=lambda: EntityKey(EMPTY_INDEX, 0))
    bitmask: int = 0
    position: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=Vec2)
    direction_vec: Vec2 = field(default_factory=Vec2)
    physical_bounds: Bounds = field(default_factory=Bounds)
    sprite_source: SpriteSource = field(default_factory=SpriteSource)
    lifetime: int = 0
    damage: int = 0
    health: int = 0
    animation: AnimationState = field(default_factory=AnimationState)
    direction: Direction = Direction.IDLE

    def has(self, mask: int) -> bool:
        """Return True if every bit of ``mask`` is set on this entity."""
        return (self.bitmask & mask) == mask

    def place(self, x: int, y: int) -> None:
        self.position = Vec2(x, y)
        self.bitmask |= IS_MOVABLE_MASK

    def resize(self, x: int, y: int) -> None:
        self.size = Vec2(x, y)
        self.bitmask |= IS_DRAWABLE_MASK

    def set_physical_bounds(self, x: int, y: int, width: int, height: int) -> None:
        self.physical_bounds = Bounds(x, y, width, height)
        self.bitmask |= IS_DRAWABLE_MASK

    def set_sprite_source(
        self, texture: int, x: int, y: int, width: int, height: int
    ) -> None:
        self.sprite_source = SpriteSource(texture, x, y, width, height)
        self.bitmask |= IS_DRAWABLE_MASK

    def steer(self, x: int, y: int) -> None:
        self.direction_vec = Vec2(x, y)
        self.bitmask |= IS_MOVABLE_MASK

    def start_animation(self, resource_index: int) -> None:
        self.animation = AnimationState(resource_index, 0, 0.0)
        self.bitmask |= HAS_ANIMATION_MASK


class EntityStore:
    """Fixed-size pool of entity slots addressed by generational keys.

    Slot 0 is never handed out. Deactivated slots are retired: their key
    index becomes 0 and they are not reused until the store is reset.
    """

    def __init__(self) -> None:
        self._slots: list[Entity] = []
        self._max_index = 0
        self.reset()

    def reset(self) -> None:
        """Mark every slot empty."""
        self._slots = [Entity() for _ in range(MAX_ENTITIES)]
        self._max_index = 0

    def create(self) -> EntityKey:
        """Allocate a fresh entity and return its key."""
        for index, slot in enumerate(self._slots[1:], start=1):
            if slot.key.index == EMPTY_INDEX:
                key = EntityKey(index, slot.key.generation + 1)
                self._slots[index] = Entity(key=key)
                self._max_index = max(self._max_index, index + 1)
                return key
        raise RuntimeError("entity store is full")

    def _is_valid(self, key: EntityKey) -> bool:
        return (
            0 <= key.index < MAX_ENTITIES
            and self._slots[key.index].key.generation == key.generation
        )

    def get(self, key: EntityKey) -> Optional[Entity]:
        """Return the entity for ``key``, or None if the key is stale."""
        return self._slots[key.index] if self._is_valid(key) else None

    def assign_bitmask(self, key: EntityKey, bitmask: int) -> None:
        """Replace the component bitmask of the entity behind ``key``."""
        if not self._is_valid(key):
            raise KeyError(f"generation does not match for index {key.index}")
        self._slots[key.index].bitmask = bitmask

    def deactivate(self, key: EntityKey) -> None:
        """Retire the slot behind ``key`` if its generation still matches."""
        if not 0 <= key.index < MAX_ENTITIES:
            return
        slot = self._slots[key.index]
        if slot.key.generation == key.generation:
            slot.bitmask = 0
            slot.key = EntityKey(0, slot.key.generation)

    def max_index(self) -> int:
        """One past the highest slot ever handed out."""
        return self._max_index

    def __getitem__(self, index: int) -> Entity:
        return self._slots[index]

    def __iter__(self) -> Iterator[Entity]:
        """Iterate over every slot below ``max_index()``, empty ones included."""
        return iter(self._slots[: self._max_index])