"""Keyboard control of the player entity."""

from __future__ import annotations

from contextlib import suppress

import pygame

from tinyfield.actions import Action
from tinyfield.collision_queue import QueueFullError
from tinyfield.entities import Direction
from tinyfield.game_state import GameState

MOVEMENT_KEYS = (pygame.K_w, pygame.K_a, pygame.K_s, pygame.K_d)


def key_down(state: GameState, key: int) -> None:
    """Start moving or attacking in response to a pressed key."""
    player = state.entities[state.player_key.index]
    if key == pygame.K_w:
        player.direction = Direction.N
        player.direction_vec.y = -1
    if key == pygame.K_d:
        player.direction = Direction.E
        player.direction_vec.x = 1
    if key == pygame.K_a:
        player.direction = Direction.W
        player.direction_vec.x = -1
    if key == pygame.K_s:
        player.direction = Direction.S
        player.direction_vec.y = 1
    if key == pygame.K_j:
        # Attacks beyond the per-frame limit are dropped.
        with suppress(QueueFullError):
            state.actions.push(Action.player_attack(state.player_key))


def key_up(state: GameState, key: int) -> None:
    """Stop the player when any movement key is released."""
    if key in MOVEMENT_KEYS:
        player = state.entities[state.player_key.index]
        player.direction = Direction.IDLE
        player.direction_vec.x = 0
        player.direction_vec.y = 0