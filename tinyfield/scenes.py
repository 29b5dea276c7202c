"""Scenes and the entities each one spawns."""

from __future__ import annotations

from enum import Enum, auto

from tinyfield.entities import (
    HAS_ANIMATION_MASK,
    HAS_COLLIDER_MASK,
    IS_DRAWABLE_MASK,
    IS_MOVABLE_MASK,
    IS_PLAYER_MASK,
    Direction,
    EntityKey,
    EntityStore,
)


class SceneType(Enum):
    FIELD_SCENE = auto()


def spawn_rapp(entities: EntityStore) -> EntityKey:
    """Spawn the animated player character and return its key."""
    key = entities.create()
    rapp = entities[key.index]
    rapp.place(150, 100)
    rapp.resize(65, 80)
    rapp.set_physical_bounds(30, 0, 30, 43)
    rapp.set_sprite_source(1, 79, 84, 65, 81)
    rapp.direction = Direction.IDLE
    rapp.steer(0, 0)
    rapp.start_animation(0)
    entities.assign_bitmask(
        key,
        HAS_ANIMATION_MASK
        | IS_DRAWABLE_MASK
        | IS_MOVABLE_MASK
        | IS_PLAYER_MASK
        | HAS_COLLIDER_MASK,
    )
    return key


def spawn_kuribo(entities: EntityStore) -> EntityKey:
    """Spawn a stationary enemy with health and a collider."""
    key = entities.create()
    kuribo = entities[key.index]
    kuribo.place(300, 500)
    kuribo.resize(50, 50)
    kuribo.health = 40
    kuribo.set_physical_bounds(0, 0, 50, 50)
    kuribo.set_sprite_source(2, 0, 0, 512, 512)
    kuribo.direction = Direction.IDLE
    kuribo.steer(0, 0)
    entities.assign_bitmask(key, IS_DRAWABLE_MASK | IS_MOVABLE_MASK | HAS_COLLIDER_MASK)
    return key


def load_field_scene(entities: EntityStore) -> EntityKey:
    """Populate the field scene and return the player's key."""
    player = spawn_rapp(entities)
    spawn_kuribo(entities)
    return player


def load_scene(entities: EntityStore, scene_type: SceneType) -> EntityKey:
    """Load the entities of ``scene_type`` and return the player's key."""
    if scene_type is SceneType.FIELD_SCENE:
        return load_field_scene(entities)
    raise ValueError(f"unknown scene: {scene_type!r}")