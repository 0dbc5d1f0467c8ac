"""Pydantic schemas for request validation and response serialization.

Each resource follows the same layering (see ``base``), every success
response is wrapped in an envelope (see ``envelope``) and every failure in
``ErrorResponse`` (see ``errors``).
"""

from stratum.api.schemas.base import (
    BaseSchema,
    CreateSchema,
    DeleteResponse,
    RequestSchema,
    ResponseSchema,
    UpdateSchema,
)
from stratum.api.schemas.envelope import (
    ApiResponse,
    PagedResponse,
    PaginationMeta,
    ResponseMeta,
    paged_response,
    success_response,
)
from stratum.api.schemas.errors import (
    ErrorResponse,
    FieldError,
    ServiceInfo,
    error_responses,
)
from stratum.api.schemas.items import (
    ItemBase,
    ItemCreate,
    ItemResponse,
    ItemUpdate,
)
from stratum.api.schemas.pagination import Pagination, PaginationParams
from stratum.api.schemas.users import (
    UserBase,
    UserCreate,
    UserResponse,
    UserSummary,
    UserUpdate,
)

__all__ = [
    "ApiResponse",
    "BaseSchema",
    "CreateSchema",
    "DeleteResponse",
    "ErrorResponse",
    "FieldError",
    "ItemBase",
    "ItemCreate",
    "ItemResponse",
    "ItemUpdate",
    "PagedResponse",
    "Pagination",
    "PaginationMeta",
    "PaginationParams",
    "RequestSchema",
    "ResponseMeta",
    "ResponseSchema",
    "ServiceInfo",
    "UpdateSchema",
    "UserBase",
    "UserCreate",
    "UserResponse",
    "UserSummary",
    "UserUpdate",
    "error_responses",
    "paged_response",
    "success_response",
]
