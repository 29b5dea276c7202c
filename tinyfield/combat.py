"""Attacks and damage resolution."""

from __future__ import annotations

from tinyfield.collision_queue import CollisionQueue
from tinyfield.entities import (
    IS_DAMAGE_MASK,
    IS_DRAWABLE_MASK,
    EntityKey,
    EntityStore,
    Vec2,
)
from tinyfield.physics import check_collisions

ATTACK_RADIUS = 100
ATTACK_LIFETIME = 1
ATTACK_DAMAGE = 10


def process_attack(
    entities: EntityStore, queue: CollisionQueue, attacker_key: EntityKey
) -> EntityKey:
    """Spawn a short-lived hit in front of the attacker and check what it hits."""
    key = entities.create()
    attacker = entities.get(attacker_key)
    position = attacker.position if attacker is not None else Vec2()
    heading = attacker.direction_vec if attacker is not None else Vec2()

    hit = entities[key.index]
    hit.place(position.x + heading.x * ATTACK_RADIUS, position.y + heading.y * ATTACK_RADIUS)
    hit.resize(40, 40)
    hit.set_physical_bounds(0, 24, 40, 15)
    hit.lifetime = ATTACK_LIFETIME
    hit.damage = ATTACK_DAMAGE
    hit.set_sprite_source(0, 198, 66, 62, 64)
    hit.steer(0, 0)
    entities.assign_bitmask(key, IS_DRAWABLE_MASK | IS_DAMAGE_MASK)

    check_collisions(entities, queue, key)
    return key


def resolve_collisions(entities: EntityStore, queue: CollisionQueue) -> None:
    """Apply each queued hit's damage to its victim, removing the dead."""
    for collision in queue:
        attacker = entities.get(collision.first)
        victim = entities.get(collision.second)
        damage = attacker.damage if attacker is not None else 0
        health = victim.health if victim is not None else 0
        new_health = health - damage
        if victim is not None:
            victim.health = new_health
        if new_health <= 0:
            entities.deactivate(collision.second)