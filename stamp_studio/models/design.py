"""Design model - a client's customization of a product."""

from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stamp_studio.domain.lifecycle import DesignStatus
from stamp_studio.domain.transforms import Transforms
from stamp_studio.models.base import Base, TimestampMixin
from stamp_studio.models.types import TransformsType

if TYPE_CHECKING:
    from stamp_studio.models.product import Product
    from stamp_studio.models.user import User


class Design(Base, TimestampMixin):
    """Stamp placed on a product, awaiting or past designer review."""

    __tablename__ = "designs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    color: Mapped[str] = mapped_column(String(50), nullable=False)
    image_url: Mapped[str] = mapped_column(String(500), nullable=False)
    transforms: Mapped[Transforms] = mapped_column(TransformsType, nullable=False)
    status: Mapped[DesignStatus] = mapped_column(
        Enum(DesignStatus, name="design_status"),
        nullable=False,
        default=DesignStatus.PENDING,
        index=True,
    )

    # Relationships
    user: Mapped["User"] = relationship("User", lazy="raise")
    product: Mapped["Product"] = relationship("Product", lazy="raise")

    def __repr__(self) -> str:
        return f"<Design(id={self.id}, status={self.status})>"
