"""Window setup and the main game loop."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

import pygame

from tinyfield.animations import default_resources
from tinyfield.game_manager import GameManager
from tinyfield.game_state import GameState
from tinyfield.input import process_events
from tinyfield.rendering import (
    TEXTURE_PATHS,
    WINDOW_SIZE,
    WINDOW_TITLE,
    Renderer,
    load_textures,
)

FPS = 60
FRAME_TIME = 1000 // FPS


def frame_delay(frame_ms: int) -> int:
    """Milliseconds to wait so a frame that took ``frame_ms`` lasts FRAME_TIME."""
    return max(FRAME_TIME - frame_ms, 0)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="tinyfield", description="Run the field game.")
    parser.parse_args(argv)

    try:
        pygame.init()
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
    except pygame.error as exc:
        print(f"Error initializing display: {exc}", file=sys.stderr)
        pygame.quit()
        return 1

    try:
        animations = default_resources()
        state = GameState()
        state.initialize()
        manager = GameManager(state, animations)
        renderer = Renderer(screen, load_textures(TEXTURE_PATHS), animations)

        looping = True
        last_frame = pygame.time.get_ticks()
        while looping:
            current = pygame.time.get_ticks()
            delta = (current - last_frame) / 1000.0
            last_frame = current

            looping = process_events(pygame.event.get(), state)
            manager.update(current, delta)
            renderer.present(state.entities)

            pygame.time.delay(frame_delay(pygame.time.get_ticks() - current))
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())