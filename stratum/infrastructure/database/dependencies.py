"""FastAPI dependency injection for database session management.

One session is opened per request; it is committed when the route returns
and rolled back when the route raises, so a service that raises a domain
error after a partial write leaves nothing behind.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from stratum.infrastructure.database.session import get_async_session


async def get_db() -> AsyncGenerator[AsyncSession]:
    """Provide a database session for FastAPI dependency injection.

    Yields:
        AsyncGenerator[AsyncSession]: A session committed on success and
            rolled back on error.

    Example:
        @router.get("/users")
        async def list_users(db: DatabaseSession): ...
    """
    async with get_async_session() as session:
        yield session


DatabaseSession = Annotated[AsyncSession, Depends(get_db)]
