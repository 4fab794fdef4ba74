"""Product catalog service."""

from dataclasses import replace
from typing import Any

from stamp_studio.domain.errors import NotFoundError
from stamp_studio.infra.logging import get_logger
from stamp_studio.models import Product
from stamp_studio.repositories.base import ProductFilter, ProductStore

logger = get_logger(__name__)


class ProductService:
    def __init__(self, products: ProductStore) -> None:
        self._products = products

    async def list_products(self, filter: ProductFilter | None = None) -> list[Product]:
        """List products. Only active products are returned unless ``active`` is set."""
        filter = filter or ProductFilter()
        if filter.active is None:
            filter = replace(filter, active=True)
        return await self._products.find_all(filter)

    async def get_product(self, product_id: int) -> Product:
        product = await self._products.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product not found", product_id=product_id)
        return product

    async def create_product(self, data: dict[str, Any]) -> Product:
        product = await self._products.create(data)
        logger.info("Product created", product_id=product.id, name=product.name)
        return product

    async def update_product(self, product_id: int, changes: dict[str, Any]) -> Product:
        await self.get_product(product_id)
        product = await self._products.update(product_id, changes)
        logger.info("Product updated", product_id=product_id, fields=sorted(changes))
        return product

    async def delete_product(self, product_id: int) -> None:
        await self.get_product(product_id)
        await self._products.delete(product_id)
        logger.info("Product deleted", product_id=product_id)
