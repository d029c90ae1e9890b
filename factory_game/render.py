"""Draws every sprite at its entity's transform."""

from __future__ import annotations

import pygame

from factory_game.components import Flip, SpriteComponent, TransformComponent
from factory_game.registry import Registry

BACKGROUND = (0x66, 0x66, 0xBB)


class RenderSystem:
    def __init__(self, registry: Registry, screen: pygame.Surface) -> None:
        self.registry = registry
        self.screen = screen

    def update(self) -> None:
        """Clear the screen and draw each sprite scaled by its transform."""
        self.screen.fill(BACKGROUND)
        for entity in self.registry.view(SpriteComponent, TransformComponent):
            sprite = self.registry.get_component(entity, SpriteComponent)
            transform = self.registry.get_component(entity, TransformComponent)
            if sprite.texture is not None:
                self._draw(sprite, transform)
            if self.screen is pygame.display.get_surface():
                pygame.display.flip()

    def _draw(self, sprite: SpriteComponent, transform: TransformComponent) -> None:
        src = sprite.src_rect
        width = max(int(src.w * transform.x_scale), 0)
        height = max(int(src.h * transform.y_scale), 0)
        frame = pygame.Surface(src.size, pygame.SRCALPHA)
        frame.blit(sprite.texture, (0, 0), src)
        if sprite.flip:
            frame = pygame.transform.flip(
                frame,
                bool(sprite.flip & Flip.HORIZONTAL),
                bool(sprite.flip & Flip.VERTICAL),
            )
        frame = pygame.transform.scale(frame, (width, height))
        self.screen.blit(frame, (int(transform.x_pos), int(transform.y_pos)))