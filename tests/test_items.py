import pytest

from factory_game.items import (
    ItemCategory,
    ItemData,
    ItemDatabase,
    ItemID,
    OreType,
    ore_to_item,
)


@pytest.fixture
def db():
    database = ItemDatabase()
    database.initialize()
    return database


def test_ore_to_item_mapping():
    assert ore_to_item(OreType.IRON) is ItemID.IRON_ORE
    assert ore_to_item(OreType.COPPER) is ItemID.COPPER_ORE


def test_none_item_belongs_to_no_category(db):
    assert ItemID(0) is ItemID.NONE
    assert not db.is_of_category(ItemID(0), ItemCategory.ORE)
    assert not db.is_of_category(ItemID(0), ItemCategory.INGOT)


def test_get_iron_ore(db):
    data = db.get(ItemID.IRON_ORE)
    assert data.name == "철광석"
    assert data.category is ItemCategory.ORE
    assert data.max_stack_size == 100
    assert data.id is ItemID.IRON_ORE


def test_get_copper_ingot(db):
    data = db.get(ItemID.COPPER_INGOT)
    assert data.name == "구리주괴"
    assert data.description == "구리로 된 주괴. 다른 구리 제품을 만드는데 사용된다."


def test_every_ore_maps_to_known_ore_item(db):
    for ore in OreType:
        assert db.is_of_category(ore_to_item(ore), ItemCategory.ORE)


def test_get_before_initialize_raises():
    with pytest.raises(KeyError):
        ItemDatabase().get(ItemID.IRON_ORE)


def test_get_none_raises(db):
    with pytest.raises(KeyError):
        db.get(ItemID.NONE)


def test_is_of_category(db):
    assert db.is_of_category(ItemID.IRON_INGOT, ItemCategory.INGOT)
    assert not db.is_of_category(ItemID.IRON_INGOT, ItemCategory.ORE)
    assert not db.is_of_category(ItemID.NONE, ItemCategory.ORE)


def test_item_data_default_stack_size():
    data = ItemData(ItemID.IRON_ORE, ItemCategory.ORE, "n", "d")
    assert data.max_stack_size == 50