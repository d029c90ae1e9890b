"""Item identifiers, categories and the item database."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class ItemID(IntEnum):
    NONE = 0
    IRON_ORE = 1
    COPPER_ORE = 2
    IRON_INGOT = 3
    COPPER_INGOT = 4


class ItemCategory(Enum):
    ORE = "ore"
    INGOT = "ingot"


class OreType(IntEnum):
    IRON = 0
    COPPER = 1


@dataclass(frozen=True)
class ItemData:
    id: ItemID
    category: ItemCategory
    name: str
    description: str
    max_stack_size: int = 50


_ORE_ITEMS = {
    OreType.IRON: ItemID.IRON_ORE,
    OreType.COPPER: ItemID.COPPER_ORE,
}


def ore_to_item(ore_type: OreType) -> ItemID:
    """Return the item mined from ``ore_type``, or ``ItemID.NONE``."""
    return _ORE_ITEMS.get(ore_type, ItemID.NONE)


class ItemDatabase:
    """Lookup of static item data; empty until :meth:`initialize` is called."""

    def __init__(self) -> None:
        self._items: dict[ItemID, ItemData] = {}

    def initialize(self) -> None:
        for data in (
            ItemData(ItemID.IRON_ORE, ItemCategory.ORE, "철광석",
                     "제련하여 철 주괴로 만들 수 있습니다.", 100),
            ItemData(ItemID.IRON_INGOT, ItemCategory.INGOT, "철주괴",
                     "철로 된 주괴. 다른 철강 제품을 만드는데 사용된다.", 100),
            ItemData(ItemID.COPPER_ORE, ItemCategory.ORE, "구리광석",
                     "제련하여 구리 주괴로 만들 수 있습니다.", 100),
            ItemData(ItemID.COPPER_INGOT, ItemCategory.INGOT, "구리주괴",
                     "구리로 된 주괴. 다른 구리 제품을 만드는데 사용된다.", 100),
        ):
            self._items[data.id] = data

    def get(self, item_id: ItemID) -> ItemData:
        """Return the data for ``item_id``; raises KeyError if unknown."""
        try:
            return self._items[item_id]
        except KeyError:
            raise KeyError(f"Unknown item {item_id!r}") from None

    def is_of_category(self, item_id: ItemID, category: ItemCategory) -> bool:
        data = self._items.get(item_id)
        return data is not None and data.category == category