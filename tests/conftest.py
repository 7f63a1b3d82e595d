"""
Shared pytest fixtures and configuration for all tests.
"""

import logging
import os
import sys
from collections.abc import AsyncGenerator, Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
import strawberry
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from errands.store import Store


@pytest.fixture
def store() -> Store:
    """A fresh store using the default counter id strategy."""
    return Store()


@pytest.fixture
def legacy_store() -> Store:
    """A fresh store using the length-based id strategy."""
    return Store(id_strategy="length")


@pytest.fixture
def mock_info(store: Store) -> Any:
    """Create a mock GraphQL info object whose context carries the store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "store": store}
    return info


@pytest.fixture
def app(store: Store) -> FastAPI:
    from errands.api.app import create_app

    return create_app(store=store)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client talking to the app in-process."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def restore_log_stream() -> Generator[None, None, None]:
    """Point the root handler back at the real stdout after tests that capture it."""
    yield
    logging.basicConfig(stream=sys.__stdout__, format="%(message)s", force=True)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
