import pygame
import pytest

from factory_game.animation import AnimationSystem
from factory_game.components import AnimationComponent, AnimationSequence, SpriteComponent
from factory_game.registry import Registry


@pytest.fixture
def registry():
    reg = Registry()
    reg.register_component(AnimationComponent)
    reg.register_component(SpriteComponent)
    return reg


def _animated(registry, sequence, sheet_size):
    e = registry.create_entity()
    anim = AnimationComponent(animations={"run": sequence}, current_animation_name="run")
    registry.add_component(e, anim)
    registry.add_component(e, SpriteComponent(texture=pygame.Surface(sheet_size)))
    return e, anim


def test_no_advance_before_frame_time(registry):
    e, anim = _animated(registry, AnimationSequence(0, 4, 8.0), (64, 16))
    AnimationSystem(registry).update(0.01)
    assert anim.current_frame_index == 0
    assert registry.get_component(e, SpriteComponent).src_rect == pygame.Rect(0, 0, 16, 16)


def test_advances_one_frame(registry):
    e, anim = _animated(registry, AnimationSequence(0, 4, 8.0), (64, 16))
    AnimationSystem(registry).update(0.125)
    assert anim.current_frame_index == 1
    assert anim.frame_timer == 0.0
    assert registry.get_component(e, SpriteComponent).src_rect == pygame.Rect(16, 0, 16, 16)


def test_loop_wraps_to_start(registry):
    _, anim = _animated(registry, AnimationSequence(0, 2, 1.0), (32, 16))
    system = AnimationSystem(registry)
    system.update(1.0)
    system.update(1.0)
    assert anim.current_frame_index == 0
    assert anim.is_playing is True


def test_non_loop_stops_on_last_frame(registry):
    _, anim = _animated(registry, AnimationSequence(0, 2, 1.0, loop=False), (32, 16))
    system = AnimationSystem(registry)
    for _ in range(3):
        system.update(1.0)
    assert anim.current_frame_index == 1
    assert anim.is_playing is False


def test_frames_wrap_to_next_row(registry):
    e, _ = _animated(registry, AnimationSequence(2, 4, 1.0), (32, 32))
    AnimationSystem(registry).update(0.0)
    assert registry.get_component(e, SpriteComponent).src_rect == pygame.Rect(0, 16, 16, 16)


def test_unknown_animation_raises(registry):
    e = registry.create_entity()
    registry.add_component(e, AnimationComponent(current_animation_name="missing"))
    registry.add_component(e, SpriteComponent())
    with pytest.raises(KeyError):
        AnimationSystem(registry).update(0.1)