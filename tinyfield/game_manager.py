"""Per-frame game update: actions, systems and timers."""

from __future__ import annotations

from typing import Optional, Sequence

from tinyfield.actions import ActionType
from tinyfield.animations import AnimationResource, default_resources
from tinyfield.combat import process_attack, resolve_collisions
from tinyfield.console import Console
from tinyfield.entities import HAS_ANIMATION_MASK, EntityStore
from tinyfield.game_state import GameState
from tinyfield.movement import move_players

ANIMATION_FRAME_RATE = 30.0
LIFETIME_TICK_MS = 1000


def tick_lifetimes(entities: EntityStore) -> None:
    """Count down every lifetime by one, retiring entities that run out."""
    for entity in entities:
        if entity.key.index < 0:
            continue
        if entity.lifetime > 0:
            entity.lifetime -= 1
            if entity.lifetime <= 0:
                entities.deactivate(entity.key)


def tick_animations(
    entities: EntityStore,
    animations: Sequence[AnimationResource],
    delta: float,
    frame_rate: float,
) -> None:
    """Advance animation timers and frames, wrapping at the resource's frame count."""
    frame_length = 1.0 / frame_rate
    for entity in entities:
        if entity.key.index < 0:
            continue
        anim = entity.animation
        if not entity.bitmask & HAS_ANIMATION_MASK or anim.resource_index < 0:
            continue
        anim.frame_timer += delta
        if anim.frame_timer < frame_length:
            continue
        anim.frame_timer -= frame_length
        anim.current_frame += 1
        if anim.resource_index < len(animations):
            frame_count = animations[anim.resource_index].frame_amount
            if frame_count > 0 and anim.current_frame >= frame_count:
                anim.current_frame = 0


def process_actions(state: GameState) -> None:
    """Carry out every queued action, then empty the queue."""
    for action in state.actions:
        if action.type is ActionType.PLAYER_ATTACK:
            process_attack(state.entities, state.collision_queue, action.attacker)
    state.actions.clear()


class GameManager:
    """Runs the systems over a game state once per frame."""

    def __init__(
        self,
        state: GameState,
        animations: Optional[Sequence[AnimationResource]] = None,
    ) -> None:
        self.state = state
        self.animations = list(animations) if animations is not None else default_resources()
        self.console = Console()
        self.last_second = 0

    def update(self, current_time: int, delta: float) -> None:
        """Advance the game by one frame; ``current_time`` is in milliseconds."""
        state = self.state
        process_actions(state)
        move_players(state.entities, delta)
        resolve_collisions(state.entities, state.collision_queue)
        tick_animations(state.entities, self.animations, delta, ANIMATION_FRAME_RATE)
        state.collision_queue.clear()
        if current_time > self.last_second + LIFETIME_TICK_MS:
            tick_lifetimes(state.entities)
            self.last_second = current_time