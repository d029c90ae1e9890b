"""Adds, takes and counts items in inventories."""

from __future__ import annotations

from factory_game.components import InventoryComponent
from factory_game.items import ItemDatabase, ItemID


class InventorySystem:
    def __init__(self, item_database: ItemDatabase) -> None:
        self.item_database = item_database

    def consume(self, inventory: InventoryComponent, item_id: ItemID, n: int) -> bool:
        """Take ``n`` of ``item_id`` if there are enough; return whether it did."""
        held = inventory.items.get(item_id)
        if held is None or held < n:
            return False
        held -= n
        if held == 0:
            del inventory.items[item_id]
        else:
            inventory.items[item_id] = held
        return True

    def add(self, inventory: InventoryComponent, item_id: ItemID, n: int) -> None:
        inventory.items[item_id] = inventory.items.get(item_id, 0) + n

    def get(self, inventory: InventoryComponent, item_id: ItemID) -> int:
        return inventory.items.get(item_id, 0)