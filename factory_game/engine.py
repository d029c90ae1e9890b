"""The engine: owns the registry, the dispatcher and every system, and runs a frame."""

from __future__ import annotations

from typing import Optional

import pygame

from factory_game.animation import AnimationSystem
from factory_game.assets import AssetManager
from factory_game.components import (
    AnimationComponent,
    AnimationSequence,
    InteractableComponent,
    InventoryComponent,
    MovementComponent,
    RefineryComponent,
    ResourceNodeComponent,
    SpriteComponent,
    TimerComponent,
    TransformComponent,
)
from factory_game.events import EventDispatcher, XAxisEvent, YAxisEvent
from factory_game.game_state import GameState
from factory_game.inventory import InventorySystem
from factory_game.items import ItemDatabase
from factory_game.movement import MovementSystem
from factory_game.refinery import RefinerySystem
from factory_game.registry import Registry
from factory_game.render import RenderSystem
from factory_game.resource_node import ResourceNodeSystem
from factory_game.timer import TimerSystem

PLAYER_IDLE_SHEET = "assets/img/character/Miner_IdleAnimation.png"
PLAYER_IDLE_ANIMATION = "PlayerIdle"

_COMPONENT_TYPES = (
    AnimationComponent,
    InteractableComponent,
    InventoryComponent,
    MovementComponent,
    RefineryComponent,
    ResourceNodeComponent,
    SpriteComponent,
    TimerComponent,
    TransformComponent,
)


class Engine:
    """Sets up the world with its player and advances it one frame at a time."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.current_state: Optional[GameState] = None
        self.assets = AssetManager()

        self.registry = Registry()
        self.dispatcher = EventDispatcher()
        self.item_database = ItemDatabase()
        self.item_database.initialize()

        self.animation_system = AnimationSystem(self.registry)
        self.inventory_system = InventorySystem(self.item_database)
        self.movement_system = MovementSystem(self.registry)
        self.refinery_system = RefinerySystem(self.registry)
        self.render_system = RenderSystem(self.registry, screen)
        self.resource_node_system = ResourceNodeSystem(self.item_database, self.registry)
        self.timer_system = TimerSystem(self.registry)

        for component_type in _COMPONENT_TYPES:
            self.registry.register_component(component_type)

        self.player = self._generate_player()

    def _generate_player(self) -> int:
        registry = self.registry
        player = registry.create_entity()
        registry.emplace_component(player, InventoryComponent)

        width, height = self.screen.get_size()
        registry.add_component(
            player, TransformComponent(width / 2.0, height / 2.0, 5.0, 5.0)
        )

        texture = self.assets.get_texture(PLAYER_IDLE_SHEET)
        registry.add_component(
            player, SpriteComponent(texture, pygame.Rect(0, 0, 16, 16))
        )

        registry.add_component(
            player,
            AnimationComponent(
                animations={
                    PLAYER_IDLE_ANIMATION: AnimationSequence(0, 12, 8.0, 16, 16, True)
                },
                current_animation_name=PLAYER_IDLE_ANIMATION,
            ),
        )

        movement = registry.emplace_component(player, MovementComponent)

        def on_x_axis(event: XAxisEvent) -> None:
            movement.dx = event.val

        def on_y_axis(event: YAxisEvent) -> None:
            movement.dy = event.val

        self.dispatcher.subscribe(XAxisEvent, on_x_axis)
        self.dispatcher.subscribe(YAxisEvent, on_y_axis)
        return player

    def change_state(self, new_state: Optional[GameState]) -> None:
        """Leave the current state, if any, and enter ``new_state``, if any."""
        if self.current_state is not None:
            self.current_state.exit()
        self.current_state = new_state
        if self.current_state is not None:
            self.current_state.enter()

    def update(self, delta_time: float) -> None:
        """Run every system once for a frame lasting ``delta_time`` seconds."""
        self.timer_system.update(delta_time)
        self.animation_system.update(delta_time)
        self.refinery_system.update()
        self.resource_node_system.update()
        self.movement_system.update(delta_time)
        self.render_system.update()