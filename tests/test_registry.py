from dataclasses import dataclass

import pytest

from factory_game.registry import MAX_ENTITIES, Registry


@dataclass
class Position:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Velocity:
    dx: float = 0.0
    dy: float = 0.0


@pytest.fixture
def registry():
    reg = Registry()
    reg.register_component(Position)
    reg.register_component(Velocity)
    return reg


def test_default_pool_size():
    assert Registry().max_entities == MAX_ENTITIES == 5000


def test_entities_come_from_pool_in_order():
    reg = Registry()
    first = reg.create_entity()
    second = reg.create_entity()
    assert first == 0
    assert second == first + 1
    assert reg.living_entity_count == 2


def test_destroyed_id_goes_to_back_of_pool():
    reg = Registry(max_entities=2)
    a = reg.create_entity()
    b = reg.create_entity()
    reg.destroy_entity(a)
    c = reg.create_entity()
    assert c == a
    assert c != b


def test_too_many_entities_raises():
    reg = Registry(max_entities=1)
    reg.create_entity()
    with pytest.raises(RuntimeError):
        reg.create_entity()


def test_destroy_without_living_raises():
    with pytest.raises(RuntimeError):
        Registry().destroy_entity(0)


def test_destroy_removes_all_components(registry):
    e = registry.create_entity()
    registry.add_component(e, Position(1.0, 2.0))
    registry.add_component(e, Velocity())
    registry.destroy_entity(e)
    assert not registry.has_component(e, Position)
    assert not registry.has_component(e, Velocity)


def test_add_and_get_component(registry):
    e = registry.create_entity()
    pos = Position(1.0, 2.0)
    registry.add_component(e, pos)
    assert registry.get_component(e, Position) is pos
    assert registry.has_component(e, Position)


def test_emplace_component(registry):
    e = registry.create_entity()
    vel = registry.emplace_component(e, Velocity, dx=3.0)
    assert registry.get_component(e, Velocity) == Velocity(3.0, 0.0)
    assert vel is registry.get_component(e, Velocity)


def test_remove_component(registry):
    e = registry.create_entity()
    registry.add_component(e, Position())
    registry.remove_component(e, Position)
    assert not registry.has_component(e, Position)
    with pytest.raises(KeyError):
        registry.remove_component(e, Position)


def test_unregistered_type_raises():
    reg = Registry()
    e = reg.create_entity()
    with pytest.raises(KeyError):
        reg.add_component(e, Position())
    with pytest.raises(KeyError):
        reg.get_component(e, Position)
    assert reg.has_component(e, Position) is False


def test_register_twice_keeps_data(registry):
    e = registry.create_entity()
    pos = Position()
    registry.add_component(e, pos)
    registry.register_component(Position)
    assert registry.get_component(e, Position) is pos


def test_view_intersects_component_sets(registry):
    both = [registry.create_entity() for _ in range(2)]
    only_pos = registry.create_entity()
    only_vel = registry.create_entity()
    for e in both:
        registry.add_component(e, Position())
        registry.add_component(e, Velocity())
    registry.add_component(only_pos, Position())
    registry.add_component(only_vel, Velocity())
    assert set(registry.view(Position, Velocity)) == set(both)
    assert set(registry.view(Position)) == set(both) | {only_pos}


def test_view_without_types_is_empty(registry):
    registry.add_component(registry.create_entity(), Position())
    assert registry.view() == []


def test_view_unregistered_raises(registry):
    class Unknown:
        pass

    with pytest.raises(KeyError):
        registry.view(Position, Unknown)


def test_for_each_applies_to_every_component(registry):
    ids = [registry.create_entity() for _ in range(3)]
    for e in ids:
        registry.add_component(e, Position())

    def move(_entity, pos):
        pos.x += 1.0

    registry.for_each(Position, move)
    assert all(registry.get_component(e, Position).x == 1.0 for e in ids)