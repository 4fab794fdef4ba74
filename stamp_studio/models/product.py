"""Product model - garment base available for customization."""

from decimal import Decimal

from sqlalchemy import Boolean, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from stamp_studio.models.base import Base, TimestampMixin
from stamp_studio.models.types import StringListType


class Product(Base, TimestampMixin):
    """Garment base (t-shirt, hoodie, ...) with its offered colors."""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    base_model_url: Mapped[str] = mapped_column(String(500), nullable=False)
    available_colors: Mapped[list[str]] = mapped_column(StringListType, nullable=False, default=list)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    thumbnail_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}')>"
