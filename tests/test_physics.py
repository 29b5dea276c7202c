import pytest

from tinyfield.collision_queue import Collision, CollisionQueue
from tinyfield.entities import (
    HAS_COLLIDER_MASK,
    IS_DAMAGE_MASK,
    IS_DRAWABLE_MASK,
    EntityKey,
    EntityStore,
)
from tinyfield.physics import check_collisions


def _spawn(store, x, y, mask):
    key = store.create()
    entity = store.get(key)
    entity.place(x, y)
    entity.set_physical_bounds(0, 0, 10, 10)
    store.assign_bitmask(key, mask)
    return key


def test_damage_entity_hits_overlapping_collider():
    store = EntityStore()
    queue = CollisionQueue()
    target = _spawn(store, 50, 50, HAS_COLLIDER_MASK)
    hit = _spawn(store, 50, 50, IS_DAMAGE_MASK | IS_DRAWABLE_MASK)
    check_collisions(store, queue, hit)
    assert list(queue) == [Collision(hit, target)]


def test_non_damage_entity_queues_nothing():
    store = EntityStore()
    queue = CollisionQueue()
    _spawn(store, 50, 50, HAS_COLLIDER_MASK)
    probe = _spawn(store, 50, 50, IS_DRAWABLE_MASK)
    check_collisions(store, queue, probe)
    assert len(queue) == 0


def test_distant_collider_is_not_hit():
    store = EntityStore()
    queue = CollisionQueue()
    _spawn(store, 1000, 1000, HAS_COLLIDER_MASK)
    hit = _spawn(store, 0, 0, IS_DAMAGE_MASK)
    check_collisions(store, queue, hit)
    assert len(queue) == 0


def test_entity_without_collider_is_ignored():
    store = EntityStore()
    queue = CollisionQueue()
    _spawn(store, 50, 50, IS_DRAWABLE_MASK)
    hit = _spawn(store, 50, 50, IS_DAMAGE_MASK)
    check_collisions(store, queue, hit)
    assert len(queue) == 0


def test_stale_key_raises():
    store = EntityStore()
    key = store.create()
    with pytest.raises(KeyError):
        check_collisions(store, CollisionQueue(), EntityKey(key.index, key.generation + 1))


def test_full_queue_drops_extra_collisions():
    store = EntityStore()
    queue = CollisionQueue(capacity=1)
    _spawn(store, 50, 50, HAS_COLLIDER_MASK)
    _spawn(store, 50, 50, HAS_COLLIDER_MASK)
    hit = _spawn(store, 50, 50, IS_DAMAGE_MASK)
    check_collisions(store, queue, hit)
    assert len(queue) == queue.capacity