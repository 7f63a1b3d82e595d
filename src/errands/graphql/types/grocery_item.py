"""
Grocery item GraphQL type definitions
"""

import strawberry


@strawberry.type
class GroceryItem:
    """Grocery item type for GraphQL API."""

    id: strawberry.ID
    name: str
    grabbed: bool
