"""User endpoints."""

from fastapi import APIRouter, status

from stratum.api.constants import MSG_CREATED, MSG_DELETED, MSG_UPDATED
from stratum.api.dependencies import ItemServiceDep, UserServiceDep
from stratum.api.schemas.base import DeleteResponse
from stratum.api.schemas.envelope import (
    ApiResponse,
    PagedResponse,
    paged_response,
    success_response,
)
from stratum.api.schemas.errors import error_responses
from stratum.api.schemas.items import ItemResponse
from stratum.api.schemas.pagination import Pagination
from stratum.api.schemas.users import UserCreate, UserResponse, UserUpdate

RESOURCE = "User"

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses=error_responses(409, 422),
)
async def create_user(
    payload: UserCreate, service: UserServiceDep
) -> ApiResponse[UserResponse]:
    """Register a new user."""
    user = await service.create_user(payload)
    return success_response(
        UserResponse.from_orm_model(user), MSG_CREATED.format(resource=RESOURCE)
    )


@router.get("", responses=error_responses(422))
async def list_users(
    pagination: Pagination, service: UserServiceDep
) -> PagedResponse[UserResponse]:
    """List users one page at a time."""
    users, total = await service.list_users(pagination)
    return paged_response(
        UserResponse.from_orm_list(users),
        page=pagination.page,
        page_size=pagination.page_size,
        total_items=total,
    )


@router.get("/{user_id}", responses=error_responses(404, 422))
async def get_user(user_id: int, service: UserServiceDep) -> ApiResponse[UserResponse]:
    """Fetch a single user."""
    user = await service.get_user(user_id)
    return success_response(UserResponse.from_orm_model(user))


@router.patch("/{user_id}", responses=error_responses(400, 404, 409, 422))
async def update_user(
    user_id: int, payload: UserUpdate, service: UserServiceDep
) -> ApiResponse[UserResponse]:
    """Partially update a user; omitted fields are left unchanged."""
    user = await service.update_user(user_id, payload)
    return success_response(
        UserResponse.from_orm_model(user), MSG_UPDATED.format(resource=RESOURCE)
    )


@router.delete("/{user_id}", responses=error_responses(404, 422))
async def delete_user(
    user_id: int, service: UserServiceDep
) -> ApiResponse[DeleteResponse]:
    """Delete a user together with their items."""
    await service.delete_user(user_id)
    message = MSG_DELETED.format(resource=RESOURCE)
    return success_response(DeleteResponse(id=user_id, message=message), message)


@router.get("/{user_id}/items", responses=error_responses(404, 422))
async def list_user_items(
    user_id: int, pagination: Pagination, service: ItemServiceDep
) -> PagedResponse[ItemResponse]:
    """List the items owned by a user."""
    items, total = await service.list_user_items(user_id, pagination)
    return paged_response(
        ItemResponse.from_orm_list(items),
        page=pagination.page,
        page_size=pagination.page_size,
        total_items=total,
    )
