from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info

if TYPE_CHECKING:
    from ...store import GroceryItemRecord, NewGroceryItem
    from ..types.grocery_item import GroceryItem

logger = get_logger(__name__)


def to_grocery_item(record: GroceryItemRecord) -> GroceryItem:
    from ..types.grocery_item import GroceryItem as GroceryItemType

    return GroceryItemType(
        id=strawberry.ID(record.id),
        name=record.name,
        grabbed=record.grabbed,
    )


# Query resolvers
async def resolve_grocery_items(info: strawberry.Info) -> list[GroceryItem]:
    """Resolve the whole grocery list in insertion order."""
    store = get_store_from_info(info)
    return [to_grocery_item(record) for record in store.grocery_items.all()]


# Mutation resolvers
async def add_grocery_item(info: strawberry.Info, new_item: NewGroceryItem) -> GroceryItem:
    from ...store import GroceryItemRecord

    store = get_store_from_info(info)
    record = store.grocery_items.create(
        lambda item_id: GroceryItemRecord(id=item_id, name=new_item.name)
    )

    logger.info("Grocery item added", item_id=record.id)
    return to_grocery_item(record)


async def remove_grocery_item(info: strawberry.Info, id: str) -> GroceryItem | None:
    store = get_store_from_info(info)
    record = store.grocery_items.remove_by_id(id)

    if record is None:
        logger.info("Grocery item not found for removal", item_id=id)
        return None

    logger.info("Grocery item removed", item_id=id)
    return to_grocery_item(record)


async def toggle_grocery_item(info: strawberry.Info, id: str) -> GroceryItem | None:
    """Flip ``grabbed`` on a grocery item. A missing id yields None."""
    store = get_store_from_info(info)
    record = store.grocery_items.toggle(id, "grabbed")

    if record is None:
        logger.info("Grocery item not found for toggle", item_id=id)
        return None

    logger.info("Grocery item toggled", item_id=id, grabbed=record.grabbed)
    return to_grocery_item(record)
