"""
Root GraphQL mutation definitions
"""

import strawberry

from ...store import NewGroceryItem, NewTask
from ..types.grocery_item import GroceryItem
from ..types.task import Task


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Task mutations
    @strawberry.mutation(name="addTask")
    async def add_task(
        self,
        info: strawberry.Info,
        title: str,
        category: str,
        description: str | None = None,
    ) -> Task:
        """Create a new task."""
        from ..resolvers.task import add_task

        return await add_task(info, NewTask(title=title, category=category, description=description))

    @strawberry.mutation(name="removeTask")
    async def remove_task(self, info: strawberry.Info, id: strawberry.ID) -> Task | None:
        """Remove a task. Returns null when no task has this id."""
        from ..resolvers.task import remove_task

        return await remove_task(info, id)

    @strawberry.mutation(name="toggleTask")
    async def toggle_task(self, info: strawberry.Info, id: strawberry.ID) -> Task | None:
        """Flip a task's completed flag. Returns null when no task has this id."""
        from ..resolvers.task import toggle_task

        return await toggle_task(info, id)

    # Grocery mutations
    @strawberry.mutation(name="addGroceryItem")
    async def add_grocery_item(self, info: strawberry.Info, name: str) -> GroceryItem:
        """Add an item to the grocery list."""
        from ..resolvers.grocery_item import add_grocery_item

        return await add_grocery_item(info, NewGroceryItem(name=name))

    @strawberry.mutation(name="removeGroceryItem")
    async def remove_grocery_item(
        self, info: strawberry.Info, id: strawberry.ID
    ) -> GroceryItem | None:
        """Remove a grocery item. Returns null when no item has this id."""
        from ..resolvers.grocery_item import remove_grocery_item

        return await remove_grocery_item(info, id)

    @strawberry.mutation(name="toggleGroceryItem")
    async def toggle_grocery_item(
        self, info: strawberry.Info, id: strawberry.ID
    ) -> GroceryItem | None:
        """Flip a grocery item's grabbed flag. Returns null when no item has this id."""
        from ..resolvers.grocery_item import toggle_grocery_item

        return await toggle_grocery_item(info, id)
