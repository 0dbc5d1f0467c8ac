"""Inventory items owned by users."""

from stratum.domain.items.models import Item
from stratum.domain.items.repository import ItemRepository
from stratum.domain.items.service import ItemService

__all__ = ["Item", "ItemRepository", "ItemService"]
