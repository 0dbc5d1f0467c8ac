"""Database infrastructure with async SQLAlchemy and the repository pattern.

Core components:
- **base**: Declarative base and common model fields
- **session**: Async engine and session management
- **repository**: Generic repository with CRUD operations
- **dependencies**: FastAPI dependency injection helpers
"""

from stratum.infrastructure.database.base import Base, BaseModel
from stratum.infrastructure.database.dependencies import DatabaseSession, get_db
from stratum.infrastructure.database.repository import BaseRepository
from stratum.infrastructure.database.session import (
    close_database,
    create_all_tables,
    create_database_engine,
    get_async_session,
    get_engine,
    get_session_factory,
)

__all__ = [
    "Base",
    "BaseModel",
    "BaseRepository",
    "DatabaseSession",
    "close_database",
    "create_all_tables",
    "create_database_engine",
    "get_async_session",
    "get_db",
    "get_engine",
    "get_session_factory",
]
