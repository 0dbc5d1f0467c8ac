"""Business rules for inventory items."""

from typing import TYPE_CHECKING

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from stratum.core.exceptions import (
    BusinessRuleError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from stratum.core.observability import trace_operation
from stratum.domain.items.models import Item
from stratum.domain.items.repository import ItemRepository
from stratum.domain.users.models import User
from stratum.domain.users.repository import UserRepository

if TYPE_CHECKING:
    from stratum.api.schemas.items import ItemCreate, ItemUpdate
    from stratum.api.schemas.pagination import PaginationParams

EMPTY_UPDATE_MESSAGE = "No fields provided for update"
SKU_TAKEN_MESSAGE = "An item with this SKU already exists"


class ItemService:
    """Create, read, update and delete items."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repository = ItemRepository(session)
        self.users = UserRepository(session)

    async def _get_owner(self, owner_id: int) -> User:
        owner = await self.users.get_by_id(owner_id)
        if owner is None:
            raise NotFoundError(
                f"User with ID {owner_id} not found", context={"owner_id": owner_id}
            )
        return owner

    async def _ensure_sku_available(self, sku: str) -> None:
        if await self.repository.get_by_sku(sku) is not None:
            raise ConflictError(SKU_TAKEN_MESSAGE, context={"sku": sku})

    async def create_item(self, data: "ItemCreate") -> Item:
        """Create an item for an existing, active owner.

        Args:
            data: Validated create payload.

        Returns:
            Item: The persisted item with its owner loaded.

        Raises:
            NotFoundError: If the owner does not exist.
            BusinessRuleError: If the owner account is inactive.
            ConflictError: If the SKU is already taken.
        """
        with trace_operation("items.create", owner_id=data.owner_id):
            owner = await self._get_owner(data.owner_id)
            if not owner.is_active:
                raise BusinessRuleError(
                    "Items cannot be assigned to an inactive user",
                    context={"owner_id": owner.id},
                )
            await self._ensure_sku_available(data.sku)

            try:
                item = await self.repository.create(Item(**data.model_dump()))
            except IntegrityError as e:
                raise ConflictError(
                    SKU_TAKEN_MESSAGE, context={"sku": data.sku}, cause=e
                ) from e
            item = await self.repository.load_owner(item)

        logger.info("Item created", item_id=item.id, owner_id=item.owner_id)
        return item

    async def get_item(self, item_id: int) -> Item:
        """Fetch an item or raise ``NotFoundError``."""
        item = await self.repository.get_by_id(item_id)
        if item is None:
            raise NotFoundError(
                f"Item with ID {item_id} not found", context={"item_id": item_id}
            )
        return item

    async def list_items(
        self, pagination: "PaginationParams", owner_id: int | None = None
    ) -> tuple[list[Item], int]:
        """Return one page of items, optionally restricted to one owner."""
        if owner_id is None:
            items = await self.repository.get_page(
                pagination.offset, pagination.page_size
            )
            total = await self.repository.count()
        else:
            items = await self.repository.list_by_owner(
                owner_id, pagination.offset, pagination.page_size
            )
            total = await self.repository.count_by_owner(owner_id)
        return items, total

    async def list_user_items(
        self, user_id: int, pagination: "PaginationParams"
    ) -> tuple[list[Item], int]:
        """Return one page of a user's items.

        Raises:
            NotFoundError: If the user does not exist.
        """
        await self._get_owner(user_id)
        return await self.list_items(pagination, owner_id=user_id)

    async def update_item(self, item_id: int, data: "ItemUpdate") -> Item:
        """Apply a partial update.

        Args:
            item_id: ID of the item to update.
            data: Validated update payload.

        Returns:
            Item: The updated item with its owner loaded.

        Raises:
            ValidationError: If the payload carries no fields.
            NotFoundError: If the item does not exist.
            ConflictError: If the new SKU belongs to another item.
        """
        if data.is_empty:
            raise ValidationError(EMPTY_UPDATE_MESSAGE, context={"item_id": item_id})

        with trace_operation("items.update", item_id=item_id):
            item = await self.get_item(item_id)
            changes = data.to_update_dict()

            new_sku = changes.get("sku")
            if new_sku is not None and new_sku != item.sku:
                await self._ensure_sku_available(new_sku)

            try:
                updated = await self.repository.update(item_id, changes)
            except IntegrityError as e:
                raise ConflictError(
                    SKU_TAKEN_MESSAGE, context={"item_id": item_id}, cause=e
                ) from e
            if updated is None:
                raise NotFoundError(
                    f"Item with ID {item_id} not found", context={"item_id": item_id}
                )
            updated = await self.repository.load_owner(updated)

        logger.info("Item updated", item_id=item_id, fields=sorted(changes))
        return updated

    async def delete_item(self, item_id: int) -> None:
        """Delete an item.

        Raises:
            NotFoundError: If the item does not exist.
        """
        with trace_operation("items.delete", item_id=item_id):
            deleted = await self.repository.delete(item_id)
        if not deleted:
            raise NotFoundError(
                f"Item with ID {item_id} not found", context={"item_id": item_id}
            )
        logger.info("Item deleted", item_id=item_id)
