"""SQLAlchemy-backed design store."""

from typing import Any

from sqlalchemy import Select, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from stamp_studio.domain.errors import NotFoundError
from stamp_studio.domain.lifecycle import DesignStatus
from stamp_studio.domain.transforms import Transforms
from stamp_studio.models import Design, Review
from stamp_studio.models.base import utcnow
from stamp_studio.repositories.base import DesignFilter

UPDATABLE_FIELDS = frozenset({"color", "image_url", "transforms", "status"})


def _apply_filter(stmt: Select[tuple[Design]], filter: DesignFilter | None) -> Select[tuple[Design]]:
    if filter is None:
        return stmt
    if filter.user_id is not None:
        stmt = stmt.where(Design.user_id == filter.user_id)
    if filter.product_id is not None:
        stmt = stmt.where(Design.product_id == filter.product_id)
    if filter.status is not None:
        stmt = stmt.where(Design.status == filter.status)
    if filter.date_from is not None:
        stmt = stmt.where(Design.created_at >= filter.date_from)
    if filter.date_to is not None:
        stmt = stmt.where(Design.created_at <= filter.date_to)
    return stmt


class SqlDesignStore:
    """Design persistence bound to one session (one transaction)."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        *,
        user_id: int,
        product_id: int,
        color: str,
        image_url: str,
        transforms: Transforms,
    ) -> Design:
        design = Design(
            user_id=user_id,
            product_id=product_id,
            color=color,
            image_url=image_url,
            transforms=transforms,
            status=DesignStatus.PENDING,
        )
        self._session.add(design)
        await self._session.flush()
        return design

    async def find_by_id(self, design_id: int) -> Design | None:
        stmt = (
            select(Design)
            .where(Design.id == design_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_id_with_relations(self, design_id: int) -> Design | None:
        stmt = (
            select(Design)
            .where(Design.id == design_id)
            .options(selectinload(Design.user), selectinload(Design.product))
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_all(self, filter: DesignFilter | None = None) -> list[Design]:
        stmt = _apply_filter(select(Design), filter).order_by(
            Design.created_at.desc(), Design.id.desc()
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def find_all_with_relations(self, filter: DesignFilter | None = None) -> list[Design]:
        stmt = (
            _apply_filter(select(Design), filter)
            .options(selectinload(Design.user), selectinload(Design.product))
            .order_by(Design.created_at.desc(), Design.id.desc())
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, design_id: int, changes: dict[str, Any]) -> Design:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update design fields: {sorted(unknown)}")

        design = await self.find_by_id(design_id)
        if design is None:
            raise NotFoundError("Design not found", design_id=design_id)

        for field, value in changes.items():
            if field == "transforms" and not isinstance(value, Transforms):
                value = Transforms.model_validate(value)
            setattr(design, field, value)
        await self._session.flush()
        return design

    async def transition_status(
        self,
        design_id: int,
        expected: DesignStatus,
        target: DesignStatus,
    ) -> Design | None:
        """Move a design from ``expected`` to ``target`` status atomically.

        The UPDATE is guarded on the current status, so of two concurrent
        callers only one matches a row. Returns None when no row matched.
        """
        stmt = (
            update(Design)
            .where(Design.id == design_id, Design.status == expected)
            .values(status=target, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            return None
        return await self.find_by_id(design_id)

    async def delete(self, design_id: int) -> None:
        # Reviews are never deleted on their own, only with their design
        await self._session.execute(delete(Review).where(Review.design_id == design_id))
        await self._session.execute(delete(Design).where(Design.id == design_id))
