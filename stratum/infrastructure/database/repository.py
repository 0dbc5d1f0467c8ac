"""Generic repository with async CRUD operations for SQLAlchemy models.

Repositories are the persistence layer of the validation stack: they
accept ORM instances or plain dicts that have already passed schema and
service validation, and they never see Pydantic models.
"""

from collections.abc import Mapping
from typing import Any

from loguru import logger
from sqlalchemy import Select, func, select
from sqlalchemy import delete as sql_delete
from sqlalchemy.ext.asyncio import AsyncSession

from stratum.infrastructure.database.base import BaseModel

DEFAULT_PAGINATION_LIMIT = 100


class BaseRepository[T: BaseModel]:
    """Base repository class providing common CRUD operations.

    Args:
        session: The async SQLAlchemy session to use for operations.
        model_class: The SQLAlchemy model class this repository manages.

    Example:
        class UserRepository(BaseRepository[User]):
            def __init__(self, session: AsyncSession) -> None:
                super().__init__(session, User)
    """

    def __init__(self, session: AsyncSession, model_class: type[T]) -> None:
        self.session = session
        self.model_class = model_class

    @property
    def _name(self) -> str:
        return self.model_class.__name__

    def _apply_filters(
        self, stmt: Select[Any], filters: Mapping[str, object]
    ) -> Select[Any]:
        """Add an equality condition per filter, skipping unknown columns."""
        for field, value in filters.items():
            if hasattr(self.model_class, field):
                stmt = stmt.where(getattr(self.model_class, field) == value)
            else:
                logger.warning(
                    "Attempted to filter by non-existent field '{}' on {}",
                    field,
                    self._name,
                )
        return stmt

    async def get_by_id(self, entity_id: int) -> T | None:
        """Retrieve a model instance by its ID.

        Args:
            entity_id: The primary key ID of the model to retrieve.

        Returns:
            T | None: The model instance if found, None otherwise.
        """
        stmt = select(self.model_class).where(self.model_class.id == entity_id)
        result = await self.session.execute(stmt)
        instance = result.scalar_one_or_none()

        logger.debug(
            "Fetched {} by ID {}: {}",
            self._name,
            entity_id,
            "found" if instance else "not found",
        )
        return instance

    async def get_all(
        self, skip: int = 0, limit: int = DEFAULT_PAGINATION_LIMIT
    ) -> list[T]:
        """Retrieve model instances ordered by ID with offset pagination.

        Args:
            skip: Number of records to skip.
            limit: Maximum number of records to return.

        Returns:
            list[T]: List of model instances.
        """
        return await self.get_page(skip, limit)

    async def get_page(self, skip: int, limit: int, **filters: object) -> list[T]:
        """Retrieve one page of instances matching the equality filters.

        Args:
            skip: Number of records to skip.
            limit: Maximum number of records to return.
            **filters: Field-value pairs to filter by.

        Returns:
            list[T]: Instances ordered by ID.
        """
        stmt = self._apply_filters(select(self.model_class), filters)
        stmt = stmt.order_by(self.model_class.id).offset(skip).limit(limit)
        result = await self.session.execute(stmt)
        instances = list(result.scalars().all())

        logger.debug(
            "Retrieved {} {} instances - skip: {}, limit: {}, filters: {}",
            len(instances),
            self._name,
            skip,
            limit,
            filters,
        )
        return instances

    async def create(self, obj: T) -> T:
        """Persist a new model instance.

        Args:
            obj: The model instance to create.

        Returns:
            T: The created model instance with populated ID and timestamps.
        """
        self.session.add(obj)
        await self.session.flush()
        await self.session.refresh(obj)

        logger.info("Created {} instance with ID: {}", self._name, obj.id)
        return obj

    async def update(self, entity_id: int, data: Mapping[str, object]) -> T | None:
        """Apply a partial update to the instance with the given ID.

        Args:
            entity_id: The primary key ID of the model to update.
            data: Mapping of fields to new values.

        Returns:
            T | None: The updated model instance if found, None otherwise.
        """
        instance = await self.get_by_id(entity_id)
        if instance is None:
            return None

        for key, value in data.items():
            if hasattr(instance, key):
                setattr(instance, key, value)
            else:
                logger.warning(
                    "Attempted to update non-existent field '{}' on {}",
                    key,
                    self._name,
                )

        await self.session.flush()
        await self.session.refresh(instance)

        logger.info(
            "Updated {} instance ID {} - fields: {}",
            self._name,
            entity_id,
            list(data.keys()),
        )
        return instance

    async def delete(self, entity_id: int) -> bool:
        """Delete the instance with the given ID.

        Args:
            entity_id: The primary key ID of the model to delete.

        Returns:
            bool: True if the instance was deleted, False if not found.
        """
        stmt = sql_delete(self.model_class).where(self.model_class.id == entity_id)
        result = await self.session.execute(stmt)
        deleted = result.rowcount > 0

        if deleted:
            logger.info("Deleted {} instance with ID: {}", self._name, entity_id)
        return deleted

    async def count(self, **filters: object) -> int:
        """Count instances matching the equality filters.

        Args:
            **filters: Field-value pairs to filter by.

        Returns:
            int: The number of matching instances.
        """
        stmt = self._apply_filters(
            select(func.count()).select_from(self.model_class), filters
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def exists(self, entity_id: int) -> bool:
        """Check if an instance exists by its ID.

        Args:
            entity_id: The primary key ID to check.

        Returns:
            bool: True if the instance exists, False otherwise.
        """
        return await self.count(id=entity_id) > 0

    async def filter_by(self, **kwargs: object) -> list[T]:
        """Return all instances matching the equality filters, ordered by ID.

        Args:
            **kwargs: Field-value pairs to filter by.

        Returns:
            list[T]: Matching model instances.
        """
        stmt = self._apply_filters(select(self.model_class), kwargs)
        result = await self.session.execute(stmt.order_by(self.model_class.id))
        return list(result.scalars().all())

    async def find_one_by(self, **kwargs: object) -> T | None:
        """Return the first instance matching the equality filters.

        Args:
            **kwargs: Field-value pairs to filter by.

        Returns:
            T | None: The first matching instance if found, None otherwise.
        """
        stmt = self._apply_filters(select(self.model_class), kwargs)
        stmt = stmt.order_by(self.model_class.id).limit(1)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
