"""FastAPI dependencies that build request-scoped domain services."""

from typing import Annotated

from fastapi import Depends

from stratum.domain.items.service import ItemService
from stratum.domain.users.service import UserService
from stratum.infrastructure.database.dependencies import DatabaseSession


def get_user_service(db: DatabaseSession) -> UserService:
    """Build a ``UserService`` bound to the request's session."""
    return UserService(db)


def get_item_service(db: DatabaseSession) -> ItemService:
    """Build an ``ItemService`` bound to the request's session."""
    return ItemService(db)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
ItemServiceDep = Annotated[ItemService, Depends(get_item_service)]
