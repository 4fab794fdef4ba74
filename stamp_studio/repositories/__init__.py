"""Persistence stores: protocols and SQLAlchemy implementations."""

from stamp_studio.repositories.base import (
    DesignFilter,
    DesignStore,
    ProductFilter,
    ProductStore,
    ReviewStore,
    UserStore,
)
from stamp_studio.repositories.designs import SqlDesignStore
from stamp_studio.repositories.products import SqlProductStore
from stamp_studio.repositories.reviews import SqlReviewStore
from stamp_studio.repositories.users import SqlUserStore

__all__ = [
    "DesignFilter",
    "DesignStore",
    "ProductFilter",
    "ProductStore",
    "ReviewStore",
    "UserStore",
    "SqlDesignStore",
    "SqlProductStore",
    "SqlReviewStore",
    "SqlUserStore",
]
