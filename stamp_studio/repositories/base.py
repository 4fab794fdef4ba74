"""Store interfaces consumed by the services.

Services depend on these protocols only, so tests can substitute
in-memory fakes for the SQLAlchemy implementations.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Protocol

from stamp_studio.domain.lifecycle import DesignStatus, ReviewStatus, Role
from stamp_studio.domain.transforms import Transforms
from stamp_studio.models import Design, Product, Review, User


@dataclass(frozen=True)
class DesignFilter:
    """Criteria for listing designs. Unset fields do not filter."""

    user_id: int | None = None
    product_id: int | None = None
    status: DesignStatus | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None


@dataclass(frozen=True)
class ProductFilter:
    category: str | None = None
    active: bool | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None


class DesignStore(Protocol):
    async def create(
        self,
        *,
        user_id: int,
        product_id: int,
        color: str,
        image_url: str,
        transforms: Transforms,
    ) -> Design: ...

    async def find_by_id(self, design_id: int) -> Design | None: ...

    async def find_by_id_with_relations(self, design_id: int) -> Design | None: ...

    async def find_all(self, filter: DesignFilter | None = None) -> list[Design]: ...

    async def find_all_with_relations(self, filter: DesignFilter | None = None) -> list[Design]: ...

    async def update(self, design_id: int, changes: dict[str, Any]) -> Design: ...

    async def transition_status(
        self,
        design_id: int,
        expected: DesignStatus,
        target: DesignStatus,
    ) -> Design | None: ...

    async def delete(self, design_id: int) -> None: ...


class ProductStore(Protocol):
    async def create(self, data: dict[str, Any]) -> Product: ...

    async def find_by_id(self, product_id: int) -> Product | None: ...

    async def find_all(self, filter: ProductFilter | None = None) -> list[Product]: ...

    async def update(self, product_id: int, changes: dict[str, Any]) -> Product: ...

    async def delete(self, product_id: int) -> None: ...


class ReviewStore(Protocol):
    async def create(
        self,
        *,
        design_id: int,
        reviewer_id: int,
        status: ReviewStatus,
        comment: str | None = None,
    ) -> Review: ...

    async def find_by_id(self, review_id: int) -> Review | None: ...

    async def find_by_design_id(self, design_id: int) -> list[Review]: ...

    async def find_by_design_id_with_relations(self, design_id: int) -> list[Review]: ...

    async def find_all(self) -> list[Review]: ...


class UserStore(Protocol):
    async def create(self, *, email: str, name: str | None = None, role: Role = Role.CLIENT) -> User: ...

    async def find_by_id(self, user_id: int) -> User | None: ...

    async def find_by_email(self, email: str) -> User | None: ...
