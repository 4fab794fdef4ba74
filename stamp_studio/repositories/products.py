"""SQLAlchemy-backed product store."""

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from stamp_studio.domain.errors import InvalidStateError, NotFoundError
from stamp_studio.models import Product
from stamp_studio.repositories.base import ProductFilter

PRODUCT_FIELDS = frozenset(
    {
        "name",
        "category",
        "base_model_url",
        "available_colors",
        "price",
        "thumbnail_url",
        "description",
        "active",
    }
)


class SqlProductStore:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, data: dict[str, Any]) -> Product:
        unknown = set(data) - PRODUCT_FIELDS
        if unknown:
            raise ValueError(f"Unknown product fields: {sorted(unknown)}")
        product = Product(**data)
        self._session.add(product)
        await self._session.flush()
        return product

    async def find_by_id(self, product_id: int) -> Product | None:
        return await self._session.get(Product, product_id)

    async def find_all(self, filter: ProductFilter | None = None) -> list[Product]:
        stmt = select(Product)
        if filter is not None:
            if filter.category is not None:
                stmt = stmt.where(Product.category == filter.category)
            if filter.active is not None:
                stmt = stmt.where(Product.active == filter.active)
            if filter.min_price is not None:
                stmt = stmt.where(Product.price >= filter.min_price)
            if filter.max_price is not None:
                stmt = stmt.where(Product.price <= filter.max_price)
        result = await self._session.execute(stmt.order_by(Product.name, Product.id))
        return list(result.scalars().all())

    async def update(self, product_id: int, changes: dict[str, Any]) -> Product:
        unknown = set(changes) - PRODUCT_FIELDS
        if unknown:
            raise ValueError(f"Unknown product fields: {sorted(unknown)}")
        product = await self.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product not found", product_id=product_id)
        for field, value in changes.items():
            setattr(product, field, value)
        await self._session.flush()
        return product

    async def delete(self, product_id: int) -> None:
        try:
            await self._session.execute(delete(Product).where(Product.id == product_id))
        except IntegrityError as e:
            raise InvalidStateError(
                "Product is referenced by designs and cannot be deleted",
                product_id=product_id,
            ) from e
