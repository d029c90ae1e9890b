"""Steps sprite-sheet animations and updates each sprite's source rectangle."""

from __future__ import annotations

import pygame

from factory_game.components import AnimationComponent, SpriteComponent
from factory_game.registry import Registry


class AnimationSystem:
    def __init__(self, registry: Registry) -> None:
        self.registry = registry

    def update(self, delta_time: float) -> None:
        for entity in self.registry.view(AnimationComponent, SpriteComponent):
            anim = self.registry.get_component(entity, AnimationComponent)
            sprite = self.registry.get_component(entity, SpriteComponent)
            if not anim.is_playing:
                continue

            sequence = anim.animations[anim.current_animation_name]
            anim.frame_timer += delta_time
            if anim.frame_timer >= 1.0 / sequence.frame_rate:
                anim.frame_timer = 0.0
                anim.current_frame_index += 1
                if anim.current_frame_index >= sequence.num_frames:
                    if sequence.loop:
                        anim.current_frame_index = 0
                    else:
                        anim.current_frame_index = sequence.num_frames - 1
                        anim.is_playing = False

            if sprite.texture is None:
                continue
            frames_per_row = sprite.texture.get_width() // sequence.frame_width
            frame = sequence.start_index + anim.current_frame_index
            row, column = divmod(frame, frames_per_row)
            sprite.src_rect = pygame.Rect(
                column * sequence.frame_width,
                row * sequence.frame_height,
                sequence.frame_width,
                sequence.frame_height,
            )