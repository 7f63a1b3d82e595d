"""
Root GraphQL query definitions
"""

import strawberry

from ..types.grocery_item import GroceryItem
from ..types.task import Task


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def tasks(self, info: strawberry.Info, category: str | None = None) -> list[Task]:
        """Get all tasks, or only those in the given category."""
        from ..resolvers.task import resolve_tasks

        return await resolve_tasks(info, category)

    @strawberry.field
    async def grocery_items(self, info: strawberry.Info) -> list[GroceryItem]:
        """Get the whole grocery list."""
        from ..resolvers.grocery_item import resolve_grocery_items

        return await resolve_grocery_items(info)
