"""Dispatching window events to the game."""

from __future__ import annotations

from typing import Iterable

import pygame

from tinyfield.game_state import GameState
from tinyfield.input_handler import key_down, key_up

NO_ENTITY = -1

# Clickable regions as (entity id, x, y, width, height); the field screen has none.
_CLICKABLE_REGIONS: tuple[tuple[int, int, int, int, int], ...] = ()


def clicked_entity(x: int, y: int) -> int:
    """Return the id of the clickable entity under the cursor, or 0 if there is none."""
    for entity_id, left, top, width, height in _CLICKABLE_REGIONS:
        if left <= x <= left + width and top <= y <= top + height:
            return entity_id
    return 0


def process_events(events: Iterable[pygame.event.Event], state: GameState) -> bool:
    """Handle a batch of events; return False once the game should stop."""
    looping = True
    for event in events:
        if event.type == pygame.QUIT:
            looping = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                looping = False
            key_down(state, event.key)
        elif event.type == pygame.KEYUP:
            key_up(state, event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            # Clicks are recognised but the field screen does nothing with them.
            clicked_entity(*event.pos)
    return looping