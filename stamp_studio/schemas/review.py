"""Review request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from stamp_studio.domain.lifecycle import ReviewStatus
from stamp_studio.schemas.common import UserSummary


class ApproveRequest(BaseModel):
    comment: str | None = Field(default=None, max_length=2000)

    model_config = {"extra": "forbid"}


class RejectRequest(BaseModel):
    """Rejection payload.

    Blank comments are rejected by the review service so the rule holds
    for every caller, not only HTTP clients.
    """

    comment: str | None = Field(default=None, max_length=2000)

    model_config = {"extra": "forbid"}


class ReviewDecisionResponse(BaseModel):
    """Outcome of an approve/reject call."""

    design_id: int
    status: ReviewStatus
    reviewed_at: datetime


class ReviewResponse(BaseModel):
    id: int
    design_id: int
    reviewer_id: int
    status: ReviewStatus
    comment: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}


class ReviewDetailResponse(ReviewResponse):
    reviewer: UserSummary


class ReviewListResponse(BaseModel):
    reviews: list[ReviewDetailResponse]
    total: int
