"""Review endpoints: approve, reject, review history and technical sheets."""

from typing import Annotated

from fastapi import APIRouter, Body

from stamp_studio.api.deps import CurrentCaller, Designs, ReviewerCaller, Reviews, Sheets
from stamp_studio.schemas.review import (
    ApproveRequest,
    RejectRequest,
    ReviewDecisionResponse,
    ReviewDetailResponse,
    ReviewListResponse,
)
from stamp_studio.schemas.technical_sheet import TechnicalSheet

router = APIRouter()


@router.post("/{design_id}/approve", response_model=ReviewDecisionResponse)
async def approve_design(
    design_id: int,
    caller: ReviewerCaller,
    service: Reviews,
    request: Annotated[ApproveRequest | None, Body()] = None,
) -> ReviewDecisionResponse:
    review = await service.approve_design(
        design_id=design_id,
        reviewer_id=caller.user_id,
        comment=request.comment if request else None,
    )
    return ReviewDecisionResponse(
        design_id=review.design_id,
        status=review.status,
        reviewed_at=review.created_at,
    )


@router.post("/{design_id}/reject", response_model=ReviewDecisionResponse)
async def reject_design(
    design_id: int,
    request: RejectRequest,
    caller: ReviewerCaller,
    service: Reviews,
) -> ReviewDecisionResponse:
    review = await service.reject_design(
        design_id=design_id,
        reviewer_id=caller.user_id,
        comment=request.comment,
    )
    return ReviewDecisionResponse(
        design_id=review.design_id,
        status=review.status,
        reviewed_at=review.created_at,
    )


@router.get("/{design_id}", response_model=ReviewListResponse)
async def get_design_reviews(
    design_id: int,
    caller: CurrentCaller,
    designs: Designs,
    service: Reviews,
) -> ReviewListResponse:
    """Review history of a design, visible to whoever may read the design."""
    await designs.get_design(design_id, caller)
    reviews = await service.get_design_reviews(design_id, include_reviewer=True)
    return ReviewListResponse(
        reviews=[ReviewDetailResponse.model_validate(r) for r in reviews],
        total=len(reviews),
    )


@router.get("/{design_id}/technical-sheet", response_model=TechnicalSheet)
async def get_technical_sheet(
    design_id: int,
    _: ReviewerCaller,
    generator: Sheets,
) -> TechnicalSheet:
    return await generator.generate_technical_sheet(design_id)
