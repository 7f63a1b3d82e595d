"""
Errands API
In-memory GraphQL service for a task list and a grocery list
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
