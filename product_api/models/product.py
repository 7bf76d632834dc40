"""Product ORM — the only persisted entity.

Invariants:
    - id is an autoincrement integer primary key, never reassigned
    - name is non-nullable text of any length
    - ids outside 1..ID_MAX (the INTEGER column range) never exist
    - price is non-nullable float (> 0 enforced by the validation layer)
    - availability defaults to True on insert
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from product_api.db.base import Base

ID_MAX = 2**31 - 1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    """Product record — name, price, availability."""
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    availability: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r} price={self.price}>"
