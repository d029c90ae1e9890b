"""Links resource nodes to the miner working them."""

from __future__ import annotations

from typing import Optional

from factory_game.component_array import EntityID
from factory_game.components import ResourceNodeComponent
from factory_game.items import ItemDatabase
from factory_game.registry import Registry


class ResourceNodeSystem:
    def __init__(self, item_database: ItemDatabase, registry: Optional[Registry]) -> None:
        self.item_database = item_database
        self.registry = registry

    def update(self) -> None:
        """Per-frame mining step; mining has no behaviour yet."""
        if self.registry is None:
            return

    def add_miner(self, resource_node: ResourceNodeComponent, player: EntityID) -> None:
        resource_node.miner = player

    def remove_miner(self, resource_node: ResourceNodeComponent) -> None:
        resource_node.miner = 0

    def left_count(self, resource_node: ResourceNodeComponent) -> int:
        return resource_node.left_resource