"""SQLAlchemy models for Stamp Studio."""

from stamp_studio.models.base import Base, TimestampMixin
from stamp_studio.models.design import Design
from stamp_studio.models.product import Product
from stamp_studio.models.review import Review
from stamp_studio.models.user import User

__all__ = [
    "Base",
    "TimestampMixin",
    "Design",
    "Product",
    "Review",
    "User",
]
