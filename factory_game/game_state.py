"""Top-level game states the engine switches between."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO


class GameState(ABC):
    """A state with hooks for entering and leaving it."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.active = False

    def _announce(self, message: str) -> str:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(message + "\n")
        return message

    @abstractmethod
    def enter(self) -> str:
        """Called when the state becomes current; returns the announcement."""

    @abstractmethod
    def exit(self) -> str:
        """Called when the state is replaced; returns the announcement."""


class MainMenuState(GameState):
    def enter(self) -> str:
        self.active = True
        return self._announce("Entering Main Menu")

    def exit(self) -> str:
        self.active = False
        return self._announce("Exiting Main Menu")


class PlayState(GameState):
    def enter(self) -> str:
        self.active = True
        return self._announce("Starting game!")

    def exit(self) -> str:
        self.active = False
        return self._announce("Exiting game!")