"""Review model - immutable record of a review decision."""

from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stamp_studio.domain.lifecycle import ReviewStatus
from stamp_studio.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from stamp_studio.models.design import Design
    from stamp_studio.models.user import User


class Review(Base, TimestampMixin):
    """Designer/admin decision on a design.

    ``design_id`` is unique: a design leaves PENDING exactly once.
    """

    __tablename__ = "reviews"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    design_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("designs.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    reviewer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    status: Mapped[ReviewStatus] = mapped_column(
        Enum(ReviewStatus, name="review_status"),
        nullable=False,
    )
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    design: Mapped["Design"] = relationship("Design", lazy="raise")
    reviewer: Mapped["User"] = relationship("User", lazy="raise")

    def __repr__(self) -> str:
        return f"<Review(id={self.id}, design_id={self.design_id}, status={self.status})>"
