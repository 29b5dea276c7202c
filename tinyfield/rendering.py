"""Drawing the field: textures, sprite rectangles and debug outlines."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

import pygame

from tinyfield.animations import AnimationResource
from tinyfield.entities import (
    HAS_ANIMATION_MASK,
    IS_DRAWABLE_MASK,
    Direction,
    Entity,
    EntityStore,
)

log = logging.getLogger(__name__)

WINDOW_TITLE = "Hola"
WINDOW_SIZE = (800, 600)
BACKGROUND = (0, 210, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
MARKER_SIZE = 10
FRAME_X_PADDING = 8

TEXTURE_PATHS = (
    "assets/images/bigatlas.png",
    "assets/images/rapp_cooked.png",
    "assets/images/kuribo.png",
)
FONT_PATH = "assets/oughek-font.otf"
FONT_SIZE = 40


def _half(value: int) -> int:
    return int(value / 2)


def center_rect_x(window_width: int, rect: pygame.Rect) -> pygame.Rect:
    """Return a copy of ``rect`` centred horizontally in the window."""
    centred = pygame.Rect(rect)
    centred.x = _half(window_width) - _half(rect.width)
    return centred


def sprite_rects(
    entity: Entity, animations: Sequence[AnimationResource]
) -> tuple[pygame.Rect, pygame.Rect]:
    """Return the (source, destination) rectangles for drawing ``entity``.

    The destination is centred on the entity's position and is twice its size.
    """
    source = entity.sprite_source
    x = source.x
    shift_y = 0
    if entity.bitmask & HAS_ANIMATION_MASK:
        index = entity.animation.resource_index
        if 0 <= index < len(animations):
            resource = animations[index]
            if entity.direction == Direction.IDLE:
                x = resource.idle_x
            else:
                frame = entity.animation.current_frame
                x = resource.idle_x + FRAME_X_PADDING + (frame + 1) * resource.x_offset
                shift_y = resource.y_offset * (int(entity.direction) - 1)
    src = pygame.Rect(x, source.y + shift_y, source.width, source.height)
    dest = pygame.Rect(
        entity.position.x - entity.size.x,
        entity.position.y - entity.size.y,
        entity.size.x * 2,
        entity.size.y * 2,
    )
    return src, dest


def debug_outline(
    x: int, y: int, width: int, height: int
) -> tuple[list[tuple[int, int]], pygame.Rect]:
    """Return a closed outline of the box and a small marker at its centre."""
    points = [
        (x, y),
        (x + width, y),
        (x + width, y + height),
        (x, y + height),
        (x, y),
    ]
    marker = pygame.Rect(x + _half(width), y + _half(height), MARKER_SIZE, MARKER_SIZE)
    return points, marker


def load_textures(paths: Iterable[str]) -> list[Optional[pygame.Surface]]:
    """Load each image; a file that cannot be loaded gives None in its slot."""
    textures: list[Optional[pygame.Surface]] = []
    for path in paths:
        try:
            textures.append(pygame.image.load(str(path)))
        except (pygame.error, OSError, FileNotFoundError) as exc:
            log.warning("Error loading texture %s: %s", path, exc)
            textures.append(None)
    return textures


def render_text(font, text: str) -> pygame.Surface:
    """Render ``text`` in red, without antialiasing."""
    return font.render(text, False, RED)


class Renderer:
    """Draws entities onto a surface."""

    def __init__(
        self,
        surface: pygame.Surface,
        textures: Sequence[Optional[pygame.Surface]],
        animations: Sequence[AnimationResource],
    ) -> None:
        self.surface = surface
        self.textures = list(textures)
        self.animations = list(animations)

    def _texture(self, index: int) -> Optional[pygame.Surface]:
        if 0 <= index < len(self.textures):
            return self.textures[index]
        return None

    def _blit(self, texture: pygame.Surface, src: pygame.Rect, dest: pygame.Rect) -> None:
        area = src.clip(texture.get_rect())
        if area.width <= 0 or area.height <= 0 or dest.width <= 0 or dest.height <= 0:
            return
        piece = texture.subsurface(area)
        self.surface.blit(pygame.transform.scale(piece, dest.size), dest.topleft)

    def _draw_outline(self, x: int, y: int, width: int, height: int) -> None:
        points, marker = debug_outline(x, y, width, height)
        self.surface.fill(RED, marker)
        pygame.draw.lines(self.surface, RED, False, points)

    def draw_entities(self, entities: EntityStore) -> int:
        """Draw every drawable entity with a loaded texture; return how many."""
        drawn = 0
        for entity in entities:
            if entity.key.index < 0 or not entity.bitmask & IS_DRAWABLE_MASK:
                continue
            texture = self._texture(entity.sprite_source.texture)
            if texture is None:
                continue
            src, dest = sprite_rects(entity, self.animations)
            self._blit(texture, src, dest)
            bounds = entity.physical_bounds
            self._draw_outline(
                dest.x + bounds.x, dest.y + bounds.y, bounds.width * 2, bounds.height * 2
            )
            drawn += 1
        return drawn

    def present(self, entities: EntityStore) -> int:
        """Clear to the background, draw the entities and show the frame."""
        self.surface.fill(BACKGROUND)
        drawn = self.draw_entities(entities)
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()
        return drawn