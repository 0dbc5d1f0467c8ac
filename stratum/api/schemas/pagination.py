"""Query parameters shared by every paginated list endpoint."""

from typing import Annotated

from fastapi import Depends, Query
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field

from stratum.core.config import Settings, get_settings


class PaginationParams(BaseModel):
    """Validated page position for a list request.

    ``page_size`` has no default of its own; ``get_pagination`` fills it from
    ``PaginationConfig.default_page_size``.
    """

    page: int = Field(default=1, ge=1, description="Page number (1-based)")
    page_size: int = Field(ge=1, description="Maximum items per page")

    @property
    def offset(self) -> int:
        """Number of rows to skip to reach this page."""
        return (self.page - 1) * self.page_size


def get_pagination(
    settings: Annotated[Settings, Depends(get_settings)],
    page: Annotated[int, Query(ge=1, description="Page number (1-based)")] = 1,
    page_size: Annotated[
        int | None, Query(ge=1, description="Maximum items per page")
    ] = None,
) -> PaginationParams:
    """Resolve pagination query parameters against the configured limits.

    ``page_size`` falls back to the configured default; values above the
    configured maximum are rejected like any other invalid query parameter.

    Args:
        settings: Application settings injected via dependency.
        page: Requested page number.
        page_size: Requested page size, if any.

    Returns:
        PaginationParams: The resolved page position.

    Raises:
        RequestValidationError: If ``page_size`` exceeds the maximum.
    """
    config = settings.pagination_config
    if page_size is None:
        page_size = config.default_page_size
    elif page_size > config.max_page_size:
        raise RequestValidationError(
            [
                {
                    "type": "less_than_equal",
                    "loc": ("query", "page_size"),
                    "msg": (
                        f"Input should be less than or equal to {config.max_page_size}"
                    ),
                    "input": page_size,
                    "ctx": {"le": config.max_page_size},
                }
            ]
        )
    return PaginationParams(page=page, page_size=page_size)


Pagination = Annotated[PaginationParams, Depends(get_pagination)]
