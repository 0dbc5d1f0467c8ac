"""Queries specific to items."""

from sqlalchemy.ext.asyncio import AsyncSession

from stratum.domain.items.models import Item
from stratum.infrastructure.database.repository import BaseRepository


class ItemRepository(BaseRepository[Item]):
    """Repository for ``Item`` rows."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Item)

    async def get_by_sku(self, sku: str) -> Item | None:
        """Find an item by its stock keeping unit."""
        return await self.find_one_by(sku=sku.upper())

    async def list_by_owner(self, owner_id: int, skip: int, limit: int) -> list[Item]:
        """Return one page of the items owned by a user."""
        return await self.get_page(skip, limit, owner_id=owner_id)

    async def count_by_owner(self, owner_id: int) -> int:
        """Count the items owned by a user."""
        return await self.count(owner_id=owner_id)

    async def load_owner(self, item: Item) -> Item:
        """Make sure ``item.owner`` is loaded before it leaves the session.

        Response schemas read the relationship synchronously, which would
        otherwise trigger lazy IO outside the async context.

        Args:
            item: A persistent item.

        Returns:
            Item: The same item with its owner populated.
        """
        await self.session.refresh(item, attribute_names=["owner"])
        return item
