"""
Task GraphQL type definitions
"""

import strawberry


@strawberry.type
class Task:
    """Task type for GraphQL API."""

    id: strawberry.ID
    title: str
    description: str | None
    category: str
    completed: bool
