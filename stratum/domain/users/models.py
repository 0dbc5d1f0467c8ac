"""User ORM model."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, String, true
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stratum.infrastructure.database.base import BaseModel

if TYPE_CHECKING:
    from stratum.domain.items.models import Item


class User(BaseModel):
    """A user account.

    ``hashed_password`` has no counterpart on any Response schema; it is
    the field the schema layering keeps out of API output.
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255), unique=True, index=True, nullable=False
    )
    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true()
    )

    items: Mapped[list["Item"]] = relationship(
        back_populates="owner",
        passive_deletes=True,
        lazy="noload",
    )
