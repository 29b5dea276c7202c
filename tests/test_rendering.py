import pygame

from tinyfield.animations import default_resources
from tinyfield.entities import Direction, EntityStore
from tinyfield.rendering import (
    BACKGROUND,
    RED,
    Renderer,
    center_rect_x,
    debug_outline,
    load_textures,
    render_text,
    sprite_rects,
)

BLUE = (0, 0, 255, 255)


def _entity(store, x=50, y=60, sx=10, sy=20):
    key = store.create()
    entity = store[key.index]
    entity.place(x, y)
    entity.resize(sx, sy)
    entity.set_sprite_source(0, 3, 4, 30, 40)
    return entity


def test_center_rect_x_centres():
    rect = center_rect_x(800, pygame.Rect(0, 7, 200, 50))
    assert rect.centerx == 400
    assert rect.y == 7
    assert rect.size == (200, 50)


def test_sprite_rects_without_animation():
    store = EntityStore()
    entity = _entity(store)
    src, dest = sprite_rects(entity, default_resources())
    assert tuple(src) == (3, 4, 30, 40)
    assert dest.center == (50, 60)
    assert dest.size == (20, 40)


def test_sprite_rects_idle_animation_uses_idle_x():
    resources = default_resources()
    store = EntityStore()
    entity = _entity(store)
    entity.start_animation(0)
    src, _ = sprite_rects(entity, resources)
    assert src.x == resources[0].idle_x
    assert src.y == 4


def test_sprite_rects_frames_and_directions_step_by_offsets():
    resources = default_resources()
    store = EntityStore()
    entity = _entity(store)
    entity.start_animation(0)
    entity.direction = Direction.N
    first, _ = sprite_rects(entity, resources)
    entity.animation.current_frame += 1
    second, _ = sprite_rects(entity, resources)
    assert second.x - first.x == resources[0].x_offset
    entity.direction = Direction.S
    south, _ = sprite_rects(entity, resources)
    assert south.y - second.y == resources[0].y_offset * (Direction.S - Direction.N)
    assert south.x == second.x


def test_debug_outline_is_closed():
    points, marker = debug_outline(10, 20, 30, 40)
    assert len(points) == 5
    assert points[0] == points[-1] == (10, 20)
    assert points[2] == (40, 60)
    assert marker.size == (10, 10)


def test_load_textures_marks_missing(tmp_path):
    image = pygame.Surface((6, 4))
    path = tmp_path / "tile.bmp"
    pygame.image.save(image, str(path))
    textures = load_textures([str(path), str(tmp_path / "missing.png")])
    assert textures[0].get_size() == (6, 4)
    assert textures[1] is None


def test_render_text_uses_red_without_antialias():
    class _Font:
        def render(self, text, antialias, color):
            return (text, antialias, color)

    assert render_text(_Font(), "hi") == ("hi", False, RED)


def _scene():
    surface = pygame.Surface((100, 100))
    texture = pygame.Surface((64, 64))
    texture.fill(BLUE)
    store = EntityStore()
    key = store.create()
    entity = store[key.index]
    entity.place(50, 50)
    entity.resize(10, 10)
    entity.set_sprite_source(0, 0, 0, 64, 64)
    entity.set_physical_bounds(30, 30, 5, 5)
    return surface, texture, store, entity


def test_draw_entities_blits_and_outlines():
    surface, texture, store, _ = _scene()
    renderer = Renderer(surface, [texture], default_resources())
    assert renderer.draw_entities(store) == 1
    assert surface.get_at((45, 45)) == BLUE
    assert surface.get_at((77, 77)) == RED + (255,)


def test_draw_entities_skips_undrawable_and_missing_texture():
    surface, texture, store, entity = _scene()
    entity.bitmask = 0
    assert Renderer(surface, [texture], default_resources()).draw_entities(store) == 0
    entity.resize(10, 10)
    assert Renderer(surface, [None], default_resources()).draw_entities(store) == 0
    assert surface.get_at((45, 45)) == (0, 0, 0, 255)


def test_present_clears_background():
    surface = pygame.Surface((20, 20))
    renderer = Renderer(surface, [], default_resources())
    assert renderer.present(EntityStore()) == 0
    assert surface.get_at((0, 0)) == BACKGROUND + (255,)