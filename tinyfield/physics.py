"""Collision detection for a single collider against the world."""

from __future__ import annotations

from contextlib import suppress

from tinyfield.collision_queue import CollisionQueue, QueueFullError
from tinyfield.entities import (
    HAS_COLLIDER_MASK,
    IS_DAMAGE_MASK,
    EntityKey,
    EntityStore,
)


def check_collisions(entities: EntityStore, queue: CollisionQueue, key: EntityKey) -> None:
    """Queue a collision for every collider that ``key`` overlaps.

    Only damaging entities produce collisions. Collisions beyond the
    queue's capacity are dropped.
    """
    to_check = entities.get(key)
    if to_check is None:
        raise KeyError(f"wrong generation for colliding check at index {key.index}")

    pos = to_check.position
    bounds = to_check.physical_bounds
    for other in entities:
        if other.key.index <= 0 or not other.bitmask & HAS_COLLIDER_MASK:
            continue
        o_pos = other.position
        o_bounds = other.physical_bounds
        if pos.x - bounds.width + bounds.x > o_pos.x + o_bounds.width + bounds.x:
            continue
        if pos.x + bounds.width + bounds.x < o_pos.x - o_bounds.width + bounds.x:
            continue
        if pos.y - bounds.height + bounds.y > o_pos.y + o_bounds.height + bounds.y:
            continue
        if pos.y + bounds.height + bounds.y < o_pos.y - o_bounds.height + bounds.y:
            continue
        if to_check.bitmask & IS_DAMAGE_MASK:
            with suppress(QueueFullError):
                queue.add(key, other.key)