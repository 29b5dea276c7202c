"""Player movement system."""

from __future__ import annotations

from tinyfield.entities import IS_MOVABLE_MASK, IS_PLAYER_MASK, EntityStore

DEFAULT_SPEED = 200


def move_players(entities: EntityStore, delta: float, speed: int = DEFAULT_SPEED) -> int:
    """Move every movable player along its direction vector; return how many moved."""
    step = int(speed * delta)
    moved = 0
    for entity in entities:
        if entity.key.index < 0:
            continue
        if not entity.has(IS_MOVABLE_MASK | IS_PLAYER_MASK):
            continue
        entity.position.x += step * entity.direction_vec.x
        entity.position.y += step * entity.direction_vec.y
        moved += 1
    return moved