"""Handles the player's interactions with the world."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class InteractionSystem:
    """Per-frame interaction step; counts the frames it has been stepped."""

    frames: int = 0

    def update(self) -> int:
        self.frames += 1
        return self.frames