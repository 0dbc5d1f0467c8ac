"""Item endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from stratum.api.constants import MSG_CREATED, MSG_DELETED, MSG_UPDATED
from stratum.api.dependencies import ItemServiceDep
from stratum.api.schemas.base import DeleteResponse
from stratum.api.schemas.envelope import (
    ApiResponse,
    PagedResponse,
    paged_response,
    success_response,
)
from stratum.api.schemas.errors import error_responses
from stratum.api.schemas.items import ItemCreate, ItemResponse, ItemUpdate
from stratum.api.schemas.pagination import Pagination

RESOURCE = "Item"

router = APIRouter(prefix="/items", tags=["items"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses=error_responses(404, 409, 422),
)
async def create_item(
    payload: ItemCreate, service: ItemServiceDep
) -> ApiResponse[ItemResponse]:
    """Create an item for an active user."""
    item = await service.create_item(payload)
    return success_response(
        ItemResponse.from_orm_model(item), MSG_CREATED.format(resource=RESOURCE)
    )


@router.get("", responses=error_responses(422))
async def list_items(
    pagination: Pagination,
    service: ItemServiceDep,
    owner_id: Annotated[
        int | None, Query(gt=0, description="Only return items of this owner")
    ] = None,
) -> PagedResponse[ItemResponse]:
    """List items one page at a time."""
    items, total = await service.list_items(pagination, owner_id=owner_id)
    return paged_response(
        ItemResponse.from_orm_list(items),
        page=pagination.page,
        page_size=pagination.page_size,
        total_items=total,
    )


@router.get("/{item_id}", responses=error_responses(404, 422))
async def get_item(item_id: int, service: ItemServiceDep) -> ApiResponse[ItemResponse]:
    """Fetch a single item."""
    item = await service.get_item(item_id)
    return success_response(ItemResponse.from_orm_model(item))


@router.patch("/{item_id}", responses=error_responses(400, 404, 409, 422))
async def update_item(
    item_id: int, payload: ItemUpdate, service: ItemServiceDep
) -> ApiResponse[ItemResponse]:
    """Partially update an item; ``description`` may be cleared with null."""
    item = await service.update_item(item_id, payload)
    return success_response(
        ItemResponse.from_orm_model(item), MSG_UPDATED.format(resource=RESOURCE)
    )


@router.delete("/{item_id}", responses=error_responses(404, 422))
async def delete_item(
    item_id: int, service: ItemServiceDep
) -> ApiResponse[DeleteResponse]:
    """Delete an item."""
    await service.delete_item(item_id)
    message = MSG_DELETED.format(resource=RESOURCE)
    return success_response(DeleteResponse(id=item_id, message=message), message)
