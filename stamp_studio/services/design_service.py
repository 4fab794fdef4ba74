"""Design service - create, read, update and delete client designs.

All access checks go through ``stamp_studio.domain.policy``.
"""

from typing import Any

from stamp_studio.domain.errors import NotFoundError, ValidationError
from stamp_studio.domain.lifecycle import DesignStatus, ensure_modifiable
from stamp_studio.domain.policy import (
    Caller,
    DesignAction,
    authorize_design,
    ensure_no_status_change,
)
from stamp_studio.domain.transforms import Transforms
from stamp_studio.infra.logging import get_logger
from stamp_studio.models import Design, Product
from stamp_studio.repositories.base import DesignFilter, DesignStore, ProductStore

logger = get_logger(__name__)


def _ensure_color_available(product: Product, color: str) -> None:
    if color not in product.available_colors:
        raise ValidationError(
            f"Color {color} is not available for this product",
            product_id=product.id,
            available_colors=list(product.available_colors),
        )


class DesignService:
    """Client-facing design operations."""

    def __init__(self, designs: DesignStore, products: ProductStore) -> None:
        self._designs = designs
        self._products = products

    async def _load_product(self, product_id: int) -> Product:
        product = await self._products.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product not found", product_id=product_id)
        return product

    async def _load_design(self, design_id: int) -> Design:
        design = await self._designs.find_by_id(design_id)
        if design is None:
            raise NotFoundError("Design not found", design_id=design_id)
        return design

    async def create_design(
        self,
        *,
        user_id: int,
        product_id: int,
        color: str,
        image_url: str,
        transforms: Transforms,
    ) -> Design:
        """Create a PENDING design after checking the product offers ``color``."""
        product = await self._load_product(product_id)
        _ensure_color_available(product, color)

        design = await self._designs.create(
            user_id=user_id,
            product_id=product_id,
            color=color,
            image_url=image_url,
            transforms=transforms,
        )
        logger.info(
            "Design created",
            design_id=design.id,
            user_id=user_id,
            product_id=product_id,
        )
        return design

    async def get_design(self, design_id: int, caller: Caller) -> Design:
        """Fetch a design with owner and product loaded.

        Raises:
            NotFoundError: Design does not exist (checked before access rules)
            ForbiddenError: Caller is a client who does not own the design
        """
        design = await self._designs.find_by_id_with_relations(design_id)
        if design is None:
            raise NotFoundError("Design not found", design_id=design_id)
        authorize_design(caller, design, DesignAction.READ)
        return design

    async def get_user_designs(self, user_id: int) -> list[Design]:
        return await self._designs.find_all_with_relations(DesignFilter(user_id=user_id))

    async def get_pending_designs(self) -> list[Design]:
        return await self._designs.find_all_with_relations(
            DesignFilter(status=DesignStatus.PENDING)
        )

    async def get_all_designs(self, filter: DesignFilter | None = None) -> list[Design]:
        return await self._designs.find_all_with_relations(filter)

    async def update_design(
        self,
        design_id: int,
        changes: dict[str, Any],
        caller: Caller,
    ) -> Design:
        """Apply a partial update to color, image_url and/or transforms.

        The status field is never writable here; it only moves through the
        review workflow. Designs can only be edited while PENDING.
        """
        design = await self._load_design(design_id)
        authorize_design(caller, design, DesignAction.UPDATE)
        ensure_no_status_change(caller, changes)
        ensure_modifiable(design.status)

        if "color" in changes and changes["color"] != design.color:
            product = await self._load_product(design.product_id)
            _ensure_color_available(product, changes["color"])

        if not changes:
            return design

        updated = await self._designs.update(design_id, changes)
        logger.info(
            "Design updated",
            design_id=design_id,
            user_id=caller.user_id,
            fields=sorted(changes),
        )
        return updated

    async def delete_design(self, design_id: int, caller: Caller) -> None:
        design = await self._load_design(design_id)
        authorize_design(caller, design, DesignAction.DELETE)

        await self._designs.delete(design_id)
        logger.info(
            "Design deleted",
            design_id=design_id,
            user_id=caller.user_id,
            role=caller.role.value,
        )
