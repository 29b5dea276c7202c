import pytest

from tinyfield.entities import (
    HAS_ANIMATION_MASK,
    IS_DRAWABLE_MASK,
    IS_MOVABLE_MASK,
    IS_PLAYER_MASK,
    MAX_ENTITIES,
    Direction,
    EntityKey,
    EntityStore,
    Vec2,
)


@pytest.fixture
def store():
    return EntityStore()


def test_first_key_skips_slot_zero(store):
    key = store.create()
    assert key == EntityKey(1, 1)
    assert store.max_index() == key.index + 1


def test_keys_are_distinct_and_max_index_grows(store):
    first = store.create()
    second = store.create()
    assert first != second
    assert store.max_index() == second.index + 1
    assert store[second.index].key == second


def test_place_sets_position_and_movable(store):
    key = store.create()
    entity = store.get(key)
    entity.place(150, 100)
    assert entity.position == Vec2(150, 100)
    assert entity.has(IS_MOVABLE_MASK)
    assert not entity.has(IS_DRAWABLE_MASK)


def test_drawable_setters_set_mask(store):
    entity = store.get(store.create())
    entity.resize(65, 80)
    entity.set_physical_bounds(30, 0, 30, 43)
    entity.set_sprite_source(1, 79, 84, 65, 81)
    assert entity.has(IS_DRAWABLE_MASK)
    assert entity.size == Vec2(65, 80)
    assert entity.physical_bounds.width == 30
    assert entity.sprite_source.texture == 1


def test_start_animation_resets_state(store):
    entity = store.get(store.create())
    entity.animation.current_frame = 5
    entity.animation.frame_timer = 0.5
    entity.start_animation(0)
    assert entity.animation.current_frame == 0
    assert entity.animation.frame_timer == 0.0
    assert entity.has(HAS_ANIMATION_MASK)


def test_steer_sets_direction_vector(store):
    entity = store.get(store.create())
    entity.steer(-1, 1)
    assert entity.direction_vec == Vec2(-1, 1)
    assert entity.has(IS_MOVABLE_MASK)
    assert entity.direction is Direction.IDLE


def test_assign_bitmask_overwrites(store):
    key = store.create()
    store.get(key).place(1, 2)
    store.assign_bitmask(key, IS_PLAYER_MASK)
    assert store.get(key).bitmask == IS_PLAYER_MASK


def test_assign_bitmask_wrong_generation_raises(store):
    key = store.create()
    with pytest.raises(KeyError):
        store.assign_bitmask(EntityKey(key.index, key.generation + 1), 0)


def test_stale_key_yields_none(store):
    key = store.create()
    assert store.get(EntityKey(key.index, key.generation + 1)) is None
    assert store.get(EntityKey(MAX_ENTITIES, 0)) is None


def test_deactivated_slot_is_not_reused(store):
    key = store.create()
    store.get(key).place(3, 4)
    store.deactivate(key)
    assert store[key.index].bitmask == 0
    assert store[key.index].key.index == 0
    assert store.create().index != key.index


def test_store_full_raises(store):
    for _ in range(MAX_ENTITIES - 1):
        store.create()
    with pytest.raises(RuntimeError):
        store.create()


def test_reset_empties_store(store):
    first = store.create()
    store.create()
    store.reset()
    assert store.max_index() == 0
    assert list(store) == []
    assert store.create() == first


def test_iteration_covers_max_index(store):
    keys = [store.create() for _ in range(3)]
    slots = list(store)
    assert len(slots) == store.max_index()
    assert [slot.key for slot in slots[1:]] == keys