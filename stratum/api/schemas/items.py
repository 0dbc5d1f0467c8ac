"""Schemas for the item resource."""

from decimal import Decimal
from typing import Any, ClassVar

from pydantic import Field, field_validator

from stratum.api.schemas.base import (
    BaseSchema,
    CreateSchema,
    ResponseSchema,
    UpdateSchema,
)
from stratum.api.schemas.users import UserSummary

NAME_MAX_LENGTH = 120
DESCRIPTION_MAX_LENGTH = 1000
SKU_PATTERN = r"^[A-Z0-9-]{3,32}$"
PRICE_MAX_DIGITS = 12
PRICE_DECIMAL_PLACES = 2


def _upper_sku(value: Any) -> Any:  # noqa: ANN401 - runs before type validation
    if isinstance(value, str):
        return value.strip().upper()
    return value


class ItemBase(BaseSchema):
    """Fields shared by item input and output."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=NAME_MAX_LENGTH,
        description="Item name",
        examples=["Espresso cup"],
    )
    description: str | None = Field(
        default=None,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Optional free-text description",
    )
    price: Decimal = Field(
        ...,
        gt=0,
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        description="Unit price, serialized as a string",
        examples=["12.50"],
    )
    quantity: int = Field(default=0, ge=0, description="Units in stock")
    sku: str = Field(
        ...,
        pattern=SKU_PATTERN,
        description="Stock keeping unit, stored upper-cased",
        examples=["CUP-001"],
    )

    @field_validator("sku", mode="before")
    @classmethod
    def normalize_sku(cls, v: Any) -> Any:  # noqa: ANN401 - runs before type validation
        """Upper-case the SKU before the pattern is checked."""
        return _upper_sku(v)


class ItemCreate(ItemBase, CreateSchema):
    """Body of ``POST /items``."""

    owner_id: int = Field(..., gt=0, description="ID of the owning user")


class ItemUpdate(UpdateSchema):
    """Body of ``PATCH /items/{id}``.

    ``description`` may be cleared with ``null``; every other field may
    only be omitted or replaced.
    """

    non_nullable_fields: ClassVar[frozenset[str]] = frozenset(
        {"name", "price", "quantity", "sku"}
    )

    name: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    price: Decimal | None = Field(
        default=None,
        gt=0,
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
    )
    quantity: int | None = Field(default=None, ge=0)
    sku: str | None = Field(default=None, pattern=SKU_PATTERN)

    @field_validator("sku", mode="before")
    @classmethod
    def normalize_sku(cls, v: Any) -> Any:  # noqa: ANN401 - runs before type validation
        """Upper-case the SKU before the pattern is checked."""
        return _upper_sku(v)


class ItemResponse(ItemBase, ResponseSchema):
    """An item as returned by the API, with a summary of its owner."""

    owner_id: int = Field(..., description="ID of the owning user")
    owner: UserSummary | None = Field(
        default=None, description="Owner summary, when loaded"
    )
