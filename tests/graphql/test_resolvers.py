"""
Unit tests for task and grocery item resolver functions
"""

from unittest.mock import MagicMock

import pytest
import strawberry

from errands.graphql.resolvers.grocery_item import (
    add_grocery_item,
    remove_grocery_item,
    resolve_grocery_items,
    toggle_grocery_item,
)
from errands.graphql.resolvers.task import add_task, remove_task, resolve_tasks, toggle_task
from errands.graphql.types.task import Task
from errands.store import NewGroceryItem, NewTask


class TestTaskResolvers:
    """Tests for task query and mutation resolvers."""

    @pytest.mark.asyncio
    async def test_add_task_returns_new_uncompleted_task(self, mock_info, store):
        task = await add_task(mock_info, NewTask(title="Buy milk", category="errand"))

        assert isinstance(task, Task)
        assert task.id == "1"
        assert task.title == "Buy milk"
        assert task.description is None
        assert task.category == "errand"
        assert task.completed is False
        assert len(store.tasks) == 1

    @pytest.mark.asyncio
    async def test_add_task_keeps_description(self, mock_info):
        task = await add_task(
            mock_info, NewTask(title="Call", category="phone", description="about the bill")
        )

        assert task.description == "about the bill"

    @pytest.mark.asyncio
    async def test_resolve_tasks_without_category_returns_all_in_order(self, mock_info):
        for title, category in [("a", "x"), ("b", "y"), ("c", "x")]:
            await add_task(mock_info, NewTask(title=title, category=category))

        tasks = await resolve_tasks(mock_info)

        assert [t.title for t in tasks] == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_resolve_tasks_filters_by_exact_category(self, mock_info):
        for title, category in [("a", "x"), ("b", "X"), ("c", "x")]:
            await add_task(mock_info, NewTask(title=title, category=category))

        tasks = await resolve_tasks(mock_info, "x")

        assert [t.title for t in tasks] == ["a", "c"]

    @pytest.mark.asyncio
    async def test_resolve_tasks_empty_string_category_filters(self, mock_info):
        await add_task(mock_info, NewTask(title="a", category="x"))

        assert await resolve_tasks(mock_info, "") == []

    @pytest.mark.asyncio
    async def test_toggle_task_twice_restores_completed(self, mock_info):
        await add_task(mock_info, NewTask(title="a", category="x"))

        first = await toggle_task(mock_info, "1")
        second = await toggle_task(mock_info, "1")

        assert first is not None and first.completed is True
        assert second is not None and second.completed is False

    @pytest.mark.asyncio
    async def test_toggle_missing_task_returns_none(self, mock_info, store):
        assert await toggle_task(mock_info, "7") is None
        assert len(store.tasks) == 0

    @pytest.mark.asyncio
    async def test_remove_task_returns_removed(self, mock_info):
        await add_task(mock_info, NewTask(title="a", category="x"))
        await add_task(mock_info, NewTask(title="b", category="x"))

        removed = await remove_task(mock_info, "1")

        assert removed is not None and removed.title == "a"
        assert [t.title for t in await resolve_tasks(mock_info)] == ["b"]

    @pytest.mark.asyncio
    async def test_remove_missing_task_returns_none(self, mock_info):
        await add_task(mock_info, NewTask(title="a", category="x"))

        assert await remove_task(mock_info, "2") is None
        assert len(await resolve_tasks(mock_info)) == 1


class TestGroceryItemResolvers:
    """Tests for grocery item query and mutation resolvers."""

    @pytest.mark.asyncio
    async def test_add_and_list(self, mock_info):
        for name in ("eggs", "bread"):
            await add_grocery_item(mock_info, NewGroceryItem(name=name))

        items = await resolve_grocery_items(mock_info)

        assert [(i.id, i.name, i.grabbed) for i in items] == [
            ("1", "eggs", False),
            ("2", "bread", False),
        ]

    @pytest.mark.asyncio
    async def test_toggle_grabbed(self, mock_info):
        await add_grocery_item(mock_info, NewGroceryItem(name="eggs"))

        item = await toggle_grocery_item(mock_info, "1")

        assert item is not None and item.grabbed is True

    @pytest.mark.asyncio
    async def test_missing_item_yields_none(self, mock_info):
        assert await toggle_grocery_item(mock_info, "1") is None
        assert await remove_grocery_item(mock_info, "1") is None

    @pytest.mark.asyncio
    async def test_remove_item(self, mock_info, store):
        await add_grocery_item(mock_info, NewGroceryItem(name="eggs"))

        removed = await remove_grocery_item(mock_info, "1")

        assert removed is not None and removed.name == "eggs"
        assert len(store.grocery_items) == 0


@pytest.mark.asyncio
async def test_missing_store_in_context_raises():
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock()}

    with pytest.raises(RuntimeError, match="no store"):
        await resolve_tasks(info)
