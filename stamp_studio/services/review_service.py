"""Review workflow - approve or reject pending designs.

Both decisions follow the same steps: guard on PENDING, move the design
to its terminal status with a guarded update, append the review record.
The two writes share the caller's transaction, so a failure on the review
insert rolls back the status change as well.
"""

from stamp_studio.domain.errors import InvalidStateError, NotFoundError, ValidationError
from stamp_studio.domain.lifecycle import (
    REVIEW_OUTCOMES,
    DesignStatus,
    ReviewStatus,
    ensure_reviewable,
)
from stamp_studio.infra.logging import get_logger
from stamp_studio.models import Review
from stamp_studio.repositories.base import DesignStore, ReviewStore

logger = get_logger(__name__)


class ReviewService:
    """Designer/admin review decisions on designs."""

    def __init__(self, reviews: ReviewStore, designs: DesignStore) -> None:
        self._reviews = reviews
        self._designs = designs

    async def approve_design(
        self,
        design_id: int,
        reviewer_id: int,
        comment: str | None = None,
    ) -> Review:
        """Approve a pending design. The comment is optional."""
        return await self._decide(design_id, reviewer_id, ReviewStatus.APPROVED, comment)

    async def reject_design(
        self,
        design_id: int,
        reviewer_id: int,
        comment: str | None,
    ) -> Review:
        """Reject a pending design.

        Raises:
            ValidationError: ``comment`` is missing or blank (nothing is read or written)
        """
        if comment is None or not comment.strip():
            raise ValidationError("Comment is required for rejection", design_id=design_id)
        return await self._decide(design_id, reviewer_id, ReviewStatus.REJECTED, comment)

    async def get_design_reviews(
        self,
        design_id: int,
        *,
        include_reviewer: bool = False,
    ) -> list[Review]:
        """Return every review of a design, newest first.

        Access to the design is checked by the caller.
        """
        if include_reviewer:
            return await self._reviews.find_by_design_id_with_relations(design_id)
        return await self._reviews.find_by_design_id(design_id)

    async def _decide(
        self,
        design_id: int,
        reviewer_id: int,
        decision: ReviewStatus,
        comment: str | None,
    ) -> Review:
        design = await self._designs.find_by_id(design_id)
        if design is None:
            raise NotFoundError("Design not found", design_id=design_id)
        ensure_reviewable(design.status)

        target = REVIEW_OUTCOMES[decision]
        moved = await self._designs.transition_status(design_id, DesignStatus.PENDING, target)
        if moved is None:
            # Another reviewer won the race between our read and the update
            logger.warning(
                "Concurrent review lost status guard",
                design_id=design_id,
                reviewer_id=reviewer_id,
            )
            raise InvalidStateError("Only pending designs can be reviewed", design_id=design_id)

        review = await self._reviews.create(
            design_id=design_id,
            reviewer_id=reviewer_id,
            status=decision,
            comment=comment,
        )
        logger.info(
            f"Design {target.value.lower()}",
            design_id=design_id,
            reviewer_id=reviewer_id,
            review_id=review.id,
        )
        return review
