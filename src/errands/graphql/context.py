"""
Helpers for reading per-request state out of the GraphQL context
"""

from typing import Any

import strawberry

from ..store import Store


def get_store_from_info(info: strawberry.Info) -> Store:
    """Return the store the transport attached to this request's context."""
    context: dict[str, Any] = info.context
    store = context.get("store")
    if store is None:
        raise RuntimeError("GraphQL context has no store; build it with create_graphql_router()")
    return store
