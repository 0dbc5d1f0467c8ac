"""Shared fixtures for integration tests.

Each test gets its own SQLite database file with the schema created from
the ORM metadata, and a client talking to a freshly built application.
"""

from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from stratum.api.main import create_app
from stratum.core.config import get_settings
from stratum.domain import models as domain_models
from stratum.infrastructure.database.session import (
    _db_manager,
    close_database,
    create_all_tables,
)

@pytest.fixture
async def database(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> AsyncGenerator[str]:
    """Point the application at a fresh SQLite file with all tables created."""
    database_url = f"sqlite+aiosqlite:///{tmp_path / 'stratum.db'}"
    monkeypatch.setenv("DATABASE_CONFIG__DATABASE_URL", database_url)
    get_settings.cache_clear()
    _db_manager.reset()

    assert domain_models.__all__
    await create_all_tables()

    yield database_url

    await close_database()


@pytest.fixture
async def client(database: str) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to an application using the test database."""
    _ = database
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def create_user(client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    """Register a user through the API and return its ``data`` payload."""
    counter = 0

    async def _create(**overrides: Any) -> dict[str, Any]:  # noqa: ANN401
        nonlocal counter
        counter += 1
        payload: dict[str, Any] = {
            "email": f"user{counter}@example.com",
            "full_name": f"User {counter}",
            "password": "s3cretpass",
            "password_confirm": "s3cretpass",
        }
        payload.update(overrides)
        response = await client.post("/api/v1/users", json=payload)
        assert response.status_code == 201, response.text
        data: dict[str, Any] = response.json()["data"]
        return data

    return _create


@pytest.fixture
def create_item(client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    """Create an item through the API and return its ``data`` payload."""
    counter = 0

    async def _create(owner_id: int, **overrides: Any) -> dict[str, Any]:  # noqa: ANN401
        nonlocal counter
        counter += 1
        payload: dict[str, Any] = {
            "name": f"Item {counter}",
            "price": "12.50",
            "quantity": 1,
            "sku": f"SKU-{counter:03d}",
            "owner_id": owner_id,
        }
        payload.update(overrides)
        response = await client.post("/api/v1/items", json=payload)
        assert response.status_code == 201, response.text
        data: dict[str, Any] = response.json()["data"]
        return data

    return _create
