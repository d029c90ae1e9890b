"""Turns keyboard input into game actions and axis events."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

import pygame

from factory_game.command_queue import CommandQueue
from factory_game.components import TimerComponent
from factory_game.events import StartInteractEvent, StopInteractEvent, XAxisEvent, YAxisEvent

if TYPE_CHECKING:
    from factory_game.engine import Engine


class InputAction(Enum):
    START_INTERACTION = auto()
    STOP_INTERACTION = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_RIGHT = auto()
    MOVE_LEFT = auto()
    QUIT = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key together with whether it went down or up."""

    key: int
    event_type: int


class InputSystem:
    """Polls input and queues the resulting commands for the game thread."""

    def __init__(
        self, engine: "Engine", command_queue: CommandQueue, running: threading.Event
    ) -> None:
        self.engine = engine
        self.command_queue = command_queue
        self.running = running
        self.key_bindings: dict[KeyEvent, InputAction] = {}

    def register_input_bindings(self) -> None:
        self.key_bindings.update(
            {
                KeyEvent(pygame.K_j, pygame.KEYDOWN): InputAction.START_INTERACTION,
                KeyEvent(pygame.K_j, pygame.KEYUP): InputAction.STOP_INTERACTION,
                KeyEvent(pygame.K_w, pygame.KEYDOWN): InputAction.MOVE_UP,
                KeyEvent(pygame.K_s, pygame.KEYDOWN): InputAction.MOVE_DOWN,
                KeyEvent(pygame.K_a, pygame.KEYDOWN): InputAction.MOVE_LEFT,
                KeyEvent(pygame.K_d, pygame.KEYDOWN): InputAction.MOVE_RIGHT,
                KeyEvent(pygame.K_ESCAPE, pygame.KEYDOWN): InputAction.QUIT,
            }
        )

    def update(self) -> None:
        """Handle pending events, then queue axis events from the held keys."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running.clear()
                return
            if event.type in (pygame.KEYDOWN, pygame.KEYUP):
                if getattr(event, "repeat", False):
                    continue
                action = self.key_bindings.get(
                    KeyEvent(getattr(event, "key", None), event.type)
                )
                if action is not None:
                    self.handle_input_action(action)
        self.handle_input_axis(pygame.key.get_pressed())

    def handle_input_action(self, action: InputAction) -> None:
        engine = self.engine
        if action is InputAction.START_INTERACTION:
            def on_expire() -> None:
                self.command_queue.push_event(engine.dispatcher, StartInteractEvent())

            engine.registry.emplace_component(
                engine.player, TimerComponent, 1.0, 1.0, True, on_expire
            )
        elif action is InputAction.STOP_INTERACTION:
            engine.registry.remove_component(engine.player, TimerComponent)
            self.command_queue.push_event(engine.dispatcher, StopInteractEvent())
        elif action is InputAction.QUIT:
            self.running.clear()

    def handle_input_axis(self, key_state: Any) -> None:
        """Queue one Y and one X axis event from a key-state lookup."""
        if key_state[pygame.K_w]:
            y = -1.0
        elif key_state[pygame.K_s]:
            y = 1.0
        else:
            y = 0.0
        self.command_queue.push_event(self.engine.dispatcher, YAxisEvent(y))

        if key_state[pygame.K_a]:
            x = -1.0
        elif key_state[pygame.K_d]:
            x = 1.0
        else:
            x = 0.0
        self.command_queue.push_event(self.engine.dispatcher, XAxisEvent(x))