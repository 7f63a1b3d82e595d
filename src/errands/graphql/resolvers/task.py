from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info

if TYPE_CHECKING:
    from ...store import NewTask, TaskRecord
    from ..types.task import Task

logger = get_logger(__name__)


def to_task(record: TaskRecord) -> Task:
    """Convert a stored task into its GraphQL type."""
    from ..types.task import Task as TaskType

    return TaskType(
        id=strawberry.ID(record.id),
        title=record.title,
        description=record.description,
        category=record.category,
        completed=record.completed,
    )


# Query resolvers
async def resolve_tasks(info: strawberry.Info, category: str | None = None) -> list[Task]:
    """
    Resolve the task list.

    Without a category every task is returned; with one, only tasks whose
    category matches exactly (case-sensitive). Insertion order is preserved.
    """
    store = get_store_from_info(info)

    if category is None:
        records = store.tasks.all()
    else:
        records = store.tasks.filter_by_field("category", category)

    return [to_task(record) for record in records]


# Mutation resolvers
async def add_task(info: strawberry.Info, new_task: NewTask) -> Task:
    """Append a new, not yet completed task."""
    from ...store import TaskRecord

    store = get_store_from_info(info)
    record = store.tasks.create(
        lambda task_id: TaskRecord(
            id=task_id,
            title=new_task.title,
            description=new_task.description,
            category=new_task.category,
        )
    )

    logger.info("Task added", task_id=record.id, category=record.category)
    return to_task(record)


async def remove_task(info: strawberry.Info, id: str) -> Task | None:
    """Remove a task by id. A missing id is not an error; None is returned."""
    store = get_store_from_info(info)
    record = store.tasks.remove_by_id(id)

    if record is None:
        logger.info("Task not found for removal", task_id=id)
        return None

    logger.info("Task removed", task_id=id)
    return to_task(record)


async def toggle_task(info: strawberry.Info, id: str) -> Task | None:
    """Flip ``completed`` on a task. A missing id yields None."""
    store = get_store_from_info(info)
    record = store.tasks.toggle(id, "completed")

    if record is None:
        logger.info("Task not found for toggle", task_id=id)
        return None

    logger.info("Task toggled", task_id=id, completed=record.completed)
    return to_task(record)
