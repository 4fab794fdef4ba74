"""SQLAlchemy-backed review store. Reviews are append-only."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from stamp_studio.domain.errors import InvalidStateError
from stamp_studio.domain.lifecycle import ReviewStatus
from stamp_studio.models import Review


class SqlReviewStore:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        *,
        design_id: int,
        reviewer_id: int,
        status: ReviewStatus,
        comment: str | None = None,
    ) -> Review:
        review = Review(
            design_id=design_id,
            reviewer_id=reviewer_id,
            status=status,
            comment=comment or None,
        )
        self._session.add(review)
        try:
            await self._session.flush()
        except IntegrityError as e:
            # reviews.design_id is unique
            raise InvalidStateError(
                "Design has already been reviewed",
                design_id=design_id,
            ) from e
        return review

    async def find_by_id(self, review_id: int) -> Review | None:
        return await self._session.get(Review, review_id)

    async def find_by_design_id(self, design_id: int) -> list[Review]:
        stmt = (
            select(Review)
            .where(Review.design_id == design_id)
            .order_by(Review.created_at.desc(), Review.id.desc())
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def find_by_design_id_with_relations(self, design_id: int) -> list[Review]:
        stmt = (
            select(Review)
            .where(Review.design_id == design_id)
            .options(selectinload(Review.reviewer), selectinload(Review.design))
            .order_by(Review.created_at.desc(), Review.id.desc())
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def find_all(self) -> list[Review]:
        stmt = select(Review).order_by(Review.created_at.desc(), Review.id.desc())
        result = await self._session.execute(stmt)
        return list(result.scalars().all())
