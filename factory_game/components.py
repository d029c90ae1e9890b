"""Component data types attached to entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Callable, Optional

import pygame

from factory_game.component_array import EntityID
from factory_game.items import ItemID, OreType


@dataclass
class AnimationSequence:
    """One named animation laid out on a sprite sheet."""

    start_index: int
    num_frames: int
    frame_rate: float
    frame_width: int = 16
    frame_height: int = 16
    loop: bool = True


@dataclass
class AnimationComponent:
    animations: dict[str, AnimationSequence] = field(default_factory=dict)
    current_animation_name: str = ""
    current_frame_index: int = 0
    frame_timer: float = 0.0
    is_playing: bool = True


@dataclass
class InteractableComponent:
    """Marks an entity the player can interact with."""


@dataclass
class InventoryComponent:
    items: dict[ItemID, int] = field(default_factory=dict)


@dataclass
class MovementComponent:
    speed: float = 150.0
    dx: float = 0.0
    dy: float = 0.0


@dataclass
class RefineryComponent:
    connected_miner: EntityID = 0


@dataclass
class ResourceNodeComponent:
    left_resource: int
    ore: OreType
    miner: EntityID = 0


class Flip(IntFlag):
    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


@dataclass
class SpriteComponent:
    texture: Optional[pygame.Surface] = None
    src_rect: pygame.Rect = field(default_factory=lambda: pygame.Rect(0, 0, 0, 0))
    flip: Flip = Flip.NONE


@dataclass
class TileMapComponent:
    tile_images: dict[str, pygame.Surface] = field(default_factory=dict)


@dataclass
class TimerComponent:
    remaining: float
    duration: float
    is_repeating: bool
    on_expire: Callable[[], None]


@dataclass
class TransformComponent:
    x_pos: float = 0.0
    y_pos: float = 0.0
    x_scale: float = 1.0
    y_scale: float = 1.0