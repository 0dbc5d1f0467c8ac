"""Base classes for the per-resource schema family.

Every resource defines the same set of schemas, each inheriting from one of
the classes below:

- ``<Resource>Base(BaseSchema)``: fields shared by input and output
- ``<Resource>Create(<Resource>Base, CreateSchema)``: body of ``POST``
- ``<Resource>Update(UpdateSchema)``: body of ``PATCH``, every field optional
- ``<Resource>Response(<Resource>Base, ResponseSchema)``: what the API returns
- ``DeleteResponse``: body returned by ``DELETE``

Request schemas forbid unknown fields, so a typo in a client payload is a
validation error rather than a silently ignored key. Response schemas read
ORM objects directly (``from_attributes``), which keeps write-only columns
such as password hashes out of the output by construction: a field that is
not declared on the Response schema is never serialized.
"""

from collections.abc import Iterable
from datetime import datetime
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from stratum.core.types import UpdateData

NULL_NOT_ALLOWED = "Field cannot be null"


class BaseSchema(BaseModel):
    """Root of every API schema.

    Surrounding whitespace is stripped from every string before length
    and pattern constraints run, so a blank value fails ``min_length``.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


class RequestSchema(BaseSchema):
    """Root of every schema that parses a request body."""

    model_config = ConfigDict(extra="forbid")


class CreateSchema(RequestSchema):
    """Body of a create request; subclasses declare the required fields."""


class UpdateSchema(RequestSchema):
    """Body of a partial update request.

    All fields on subclasses should default to ``None``. Omitting a field
    leaves it untouched; sending ``null`` clears it, unless the field is
    listed in ``non_nullable_fields``, in which case ``null`` is rejected.
    """

    non_nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @field_validator("*", mode="after")
    @classmethod
    def reject_explicit_null(cls, value: Any, info: ValidationInfo) -> Any:  # noqa: ANN401 - applies to every field type
        """Reject ``null`` for fields that may be omitted but not cleared."""
        if value is None and info.field_name in cls.non_nullable_fields:
            raise ValueError(NULL_NOT_ALLOWED)
        return value

    def to_update_dict(self) -> UpdateData:
        """Return only the fields the client actually sent.

        Returns:
            UpdateData: Field name to new value, ``None`` meaning "clear".
        """
        return self.model_dump(exclude_unset=True)

    @property
    def is_empty(self) -> bool:
        """Whether the request carries no fields at all."""
        return not self.model_fields_set


class ResponseSchema(BaseSchema):
    """Root of every resource representation returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Unique identifier", examples=[1])
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last modification timestamp")

    @classmethod
    def from_orm_model(cls, obj: object) -> Self:
        """Build the response from an ORM instance."""
        return cls.model_validate(obj)

    @classmethod
    def from_orm_list(cls, objs: Iterable[object]) -> list[Self]:
        """Build responses from a sequence of ORM instances."""
        return [cls.model_validate(obj) for obj in objs]


class DeleteResponse(BaseSchema):
    """Confirmation returned after a resource is deleted."""

    id: int = Field(..., description="Identifier of the deleted resource")
    deleted: bool = Field(default=True, description="Always true on success")
    message: str | None = Field(
        default=None,
        description="Human-readable confirmation",
        examples=["User deleted successfully"],
    )
