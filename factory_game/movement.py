"""Moves entities along their direction at their speed."""

from __future__ import annotations

import math

from factory_game.components import MovementComponent, TransformComponent
from factory_game.registry import Registry


class MovementSystem:
    def __init__(self, registry: Registry) -> None:
        self.registry = registry

    def update(self, delta_time: float) -> None:
        """Move entities by ``speed * delta_time`` along their normalised direction.

        The pass ends at the first entity with no direction.
        """
        for entity in self.registry.view(MovementComponent, TransformComponent):
            move = self.registry.get_component(entity, MovementComponent)
            trans = self.registry.get_component(entity, TransformComponent)
            if move.dx == 0.0 and move.dy == 0.0:
                return
            length = math.hypot(move.dx, move.dy)
            trans.x_pos += move.dx / length * move.speed * delta_time
            trans.y_pos += move.dy / length * move.speed * delta_time