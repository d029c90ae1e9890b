"""Command-line entry point and the main game loop."""

from __future__ import annotations

import argparse
import threading
import time
from typing import Optional, Sequence

import pygame

from factory_game.command_queue import CommandQueue
from factory_game.engine import Engine
from factory_game.game_state import MainMenuState
from factory_game.input import InputSystem

WINDOW_TITLE = "Test"
WINDOW_SIZE = (640, 480)


def game_loop(engine: Engine, command_queue: CommandQueue, running: threading.Event) -> None:
    """Poll input, run queued commands and update the engine while ``running`` is set."""
    input_system = InputSystem(engine, command_queue, running)
    input_system.register_input_bindings()
    previous = time.perf_counter()
    while running.is_set():
        now = time.perf_counter()
        delta_time = now - previous
        previous = now

        input_system.update()
        for command in command_queue.pop_all():
            if command is not None:
                command()

        engine.update(delta_time)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="factory-game", description="Run the factory game.")
    parser.parse_args(argv)

    try:
        pygame.display.init()
    except pygame.error as exc:
        print(f"Could not initialize display: {exc}.")
        return 1
    print("Display initialized.")

    try:
        pygame.display.set_caption(WINDOW_TITLE)
        screen = pygame.display.set_mode(WINDOW_SIZE)
        engine = Engine(screen)
        engine.change_state(MainMenuState())

        running = threading.Event()
        running.set()
        game_loop(engine, CommandQueue(), running)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())