"""Links refineries to the miner working them."""

from __future__ import annotations

from typing import Optional

from factory_game.component_array import EntityID
from factory_game.components import RefineryComponent
from factory_game.registry import Registry


class RefinerySystem:
    def __init__(self, registry: Optional[Registry]) -> None:
        self.registry = registry

    def update(self) -> None:
        """Per-frame refinery step; refining has no behaviour yet."""
        if self.registry is None:
            return

    def connect_miner(self, refinery: RefineryComponent, player: EntityID) -> None:
        refinery.connected_miner = player

    def disconnect_miner(self, refinery: RefineryComponent) -> None:
        refinery.connected_miner = 0