"""Shared fixtures for unit tests."""

from datetime import UTC, datetime
from decimal import Decimal
from typing import Any, cast

import pytest
from pytest_mock import MockerFixture, MockType
from sqlalchemy.ext.asyncio import AsyncSession

from stratum.domain.items.models import Item
from stratum.domain.users.models import User

NOW = datetime(2024, 6, 14, 12, 0, tzinfo=UTC)


@pytest.fixture
def mock_session(mocker: MockerFixture) -> MockType:
    """Mock AsyncSession with async execute/flush/refresh and sync add.

    Returns:
        MockType: Session mock usable by repositories.
    """
    session = mocker.AsyncMock(spec=AsyncSession)
    session.add = mocker.Mock()
    return cast("MockType", session)


@pytest.fixture
def make_user() -> Any:  # noqa: ANN401 - factory fixture
    """Factory for persisted-looking ``User`` instances."""

    def _make(**overrides: Any) -> User:  # noqa: ANN401
        values: dict[str, Any] = {
            "id": 1,
            "email": "ada@example.com",
            "full_name": "Ada Lovelace",
            "hashed_password": "$2b$04$notarealhash",
            "is_active": True,
            "created_at": NOW,
            "updated_at": NOW,
        }
        values.update(overrides)
        return User(**values)

    return _make


@pytest.fixture
def make_item() -> Any:  # noqa: ANN401 - factory fixture
    """Factory for persisted-looking ``Item`` instances."""

    def _make(**overrides: Any) -> Item:  # noqa: ANN401
        values: dict[str, Any] = {
            "id": 10,
            "name": "Espresso cup",
            "description": None,
            "price": Decimal("12.50"),
            "quantity": 3,
            "sku": "CUP-001",
            "owner_id": 1,
            "created_at": NOW,
            "updated_at": NOW,
        }
        values.update(overrides)
        return Item(**values)

    return _make
