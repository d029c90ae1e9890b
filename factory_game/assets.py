"""Loads images once and hands out the cached surfaces."""

from __future__ import annotations

import sys
from typing import Optional

import pygame


class AssetManager:
    """Cache of loaded textures keyed by file path."""

    def __init__(self) -> None:
        self._textures: dict[str, pygame.Surface] = {}

    def get_texture(self, path: str) -> Optional[pygame.Surface]:
        """Return the image at ``path``, loading it on first use; None on failure."""
        cached = self._textures.get(path)
        if cached is not None:
            return cached
        try:
            surface = pygame.image.load(path)
        except (pygame.error, OSError) as exc:
            print(f"Failed to load image: {path} | Error: {exc}", file=sys.stderr)
            return None
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        self._textures[path] = surface
        return surface