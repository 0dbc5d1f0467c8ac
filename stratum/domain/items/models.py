"""Item ORM model."""

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stratum.infrastructure.database.base import BaseModel

if TYPE_CHECKING:
    from stratum.domain.users.models import User


class Item(BaseModel):
    """An inventory item belonging to exactly one user."""

    __tablename__ = "items"

    name: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    quantity: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0"
    )
    sku: Mapped[str] = mapped_column(
        String(32), unique=True, index=True, nullable=False
    )
    owner_id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )

    owner: Mapped["User"] = relationship(back_populates="items", lazy="selectin")
