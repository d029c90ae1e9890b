"""A small top-down factory game with pygame, built on an entity-component-system engine."""

__version__ = "0.1.0"