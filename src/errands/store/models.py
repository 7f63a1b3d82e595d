"""Record types held by the store and the typed request structs that create them."""

from dataclasses import dataclass


@dataclass
class TaskRecord:
    """A task as held in memory."""

    id: str
    title: str
    category: str
    description: str | None = None
    completed: bool = False


@dataclass
class GroceryItemRecord:
    """A grocery item as held in memory."""

    id: str
    name: str
    grabbed: bool = False


@dataclass(frozen=True)
class NewTask:
    """Validated arguments for creating a task."""

    title: str
    category: str
    description: str | None = None


@dataclass(frozen=True)
class NewGroceryItem:
    """Validated arguments for creating a grocery item."""

    name: str
