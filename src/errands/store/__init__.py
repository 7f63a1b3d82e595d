"""
In-memory store for tasks and grocery items.

The store lives for the lifetime of the process; nothing is persisted.
"""

from .collection import Collection
from .ids import CounterIdMinter, IdMinter, LengthIdMinter, create_id_minter
from .models import GroceryItemRecord, NewGroceryItem, NewTask, TaskRecord


class Store:
    """Holds the task and grocery item collections."""

    def __init__(self, id_strategy: str = "counter"):
        self.id_strategy = id_strategy
        self.tasks: Collection[TaskRecord] = Collection("tasks", create_id_minter(id_strategy))
        self.grocery_items: Collection[GroceryItemRecord] = Collection(
            "grocery_items", create_id_minter(id_strategy)
        )

    def reset(self) -> None:
        """Empty both collections and restart id minting."""
        self.tasks.clear()
        self.grocery_items.clear()


def create_store(id_strategy: str | None = None) -> Store:
    """Create a store using the configured id strategy unless one is given."""
    if id_strategy is None:
        from ..config import settings

        id_strategy = settings.id_strategy
    return Store(id_strategy=id_strategy)


__all__ = [
    "Collection",
    "CounterIdMinter",
    "GroceryItemRecord",
    "IdMinter",
    "LengthIdMinter",
    "NewGroceryItem",
    "NewTask",
    "Store",
    "TaskRecord",
    "create_id_minter",
    "create_store",
]
