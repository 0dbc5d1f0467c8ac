"""Success envelopes wrapping every non-error API response.

Every successful response has the same outer shape::

    {
        "success": true,
        "data": {...},
        "message": "User created successfully",
        "meta": {"correlation_id": "...", "request_id": "...", "timestamp": "..."}
    }

List endpoints use ``PagedResponse``, which carries a list in ``data`` and a
``pagination`` block. Errors use ``ErrorResponse`` (see ``errors``), which
shares the ``success`` flag so clients can branch on a single field.
"""

import math
from datetime import UTC, datetime
from typing import Self

from pydantic import BaseModel, Field

from stratum.core.context import RequestContext, current_request_id


class ResponseMeta(BaseModel):
    """Request metadata attached to every envelope.

    Defaults are read from the request context, so building an envelope
    inside a request fills them in without any arguments.
    """

    correlation_id: str | None = Field(
        default_factory=RequestContext.get_correlation_id,
        description="Request correlation ID for tracing and debugging",
        examples=["550e8400-e29b-41d4-a716-446655440000"],
    )
    request_id: str = Field(
        default_factory=current_request_id,
        description="Unique identifier of this request",
        examples=["req-660e8400-e29b-41d4-a716-446655440000"],
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Time the response was produced (with timezone)",
    )


class ApiResponse[T](BaseModel):
    """Envelope for a single resource or operation result."""

    success: bool = Field(default=True, description="Always true for this envelope")
    data: T | None = Field(default=None, description="Response payload")
    message: str | None = Field(
        default=None,
        description="Optional human-readable message",
        examples=["User created successfully"],
    )
    meta: ResponseMeta = Field(default_factory=ResponseMeta)


class PaginationMeta(BaseModel):
    """Position of a page within the full result set."""

    page: int = Field(..., ge=1, description="Current page number (1-based)")
    page_size: int = Field(..., ge=1, description="Maximum items per page")
    total_items: int = Field(..., ge=0, description="Items across all pages")
    total_pages: int = Field(..., ge=0, description="Number of pages")
    has_next: bool = Field(..., description="Whether a later page exists")
    has_previous: bool = Field(..., description="Whether an earlier page exists")

    @classmethod
    def build(cls, page: int, page_size: int, total_items: int) -> Self:
        """Derive page counts from the page position and total.

        Args:
            page: Current page number (1-based).
            page_size: Maximum items per page.
            total_items: Number of items across all pages.

        Returns:
            PaginationMeta: Metadata with derived page counts.
        """
        total_pages = math.ceil(total_items / page_size) if total_items else 0
        return cls(
            page=page,
            page_size=page_size,
            total_items=total_items,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_previous=page > 1,
        )


class PagedResponse[T](BaseModel):
    """Envelope for one page of a resource collection."""

    success: bool = Field(default=True, description="Always true for this envelope")
    data: list[T] = Field(default_factory=list, description="Items on this page")
    pagination: PaginationMeta
    message: str | None = Field(default=None, description="Optional message")
    meta: ResponseMeta = Field(default_factory=ResponseMeta)


def success_response[T](data: T, message: str | None = None) -> ApiResponse[T]:
    """Wrap a payload in the success envelope.

    Args:
        data: The payload, usually a Response schema instance.
        message: Optional human-readable message.

    Returns:
        ApiResponse[T]: Envelope ready to be returned from a route.
    """
    return ApiResponse(data=data, message=message)


def paged_response[T](
    items: list[T],
    *,
    page: int,
    page_size: int,
    total_items: int,
    message: str | None = None,
) -> PagedResponse[T]:
    """Wrap one page of items in the paginated envelope.

    Args:
        items: Items on the current page.
        page: Current page number (1-based).
        page_size: Maximum items per page.
        total_items: Number of items across all pages.
        message: Optional human-readable message.

    Returns:
        PagedResponse[T]: Envelope ready to be returned from a route.
    """
    return PagedResponse(
        data=items,
        pagination=PaginationMeta.build(page, page_size, total_items),
        message=message,
    )
