"""The whole mutable state of a running game."""

from __future__ import annotations

from typing import Optional

from tinyfield.actions import ActionQueue
from tinyfield.collision_queue import CollisionQueue
from tinyfield.entities import EntityKey, EntityStore
from tinyfield.scenes import SceneType, load_scene


class GameState:
    """Entities, per-frame queues, the current scene and the player."""

    def __init__(self) -> None:
        self.scene: Optional[SceneType] = None
        self.player_key = EntityKey(0, 0)
        self.entities = EntityStore()
        self.collision_queue = CollisionQueue()
        self.actions = ActionQueue()

    def initialize(self) -> None:
        """Reset storage and queues, then load the field scene."""
        self.entities.reset()
        self.collision_queue.clear()
        self.change_scene(SceneType.FIELD_SCENE)

    def change_scene(self, scene_type: SceneType) -> None:
        """Switch to ``scene_type``, spawning its entities."""
        self.scene = scene_type
        self.player_key = load_scene(self.entities, scene_type)