"""Pydantic schemas for request/response validation."""

from stamp_studio.schemas.common import ErrorResponse, HealthResponse, UserSummary
from stamp_studio.schemas.design import (
    DesignCreateRequest,
    DesignDetailResponse,
    DesignListResponse,
    DesignResponse,
    DesignSummary,
    DesignUpdateRequest,
)
from stamp_studio.schemas.product import (
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductSummary,
    ProductUpdateRequest,
)
from stamp_studio.schemas.review import (
    ApproveRequest,
    RejectRequest,
    ReviewDecisionResponse,
    ReviewDetailResponse,
    ReviewListResponse,
    ReviewResponse,
)
from stamp_studio.schemas.technical_sheet import TechnicalSheet

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "UserSummary",
    "DesignCreateRequest",
    "DesignDetailResponse",
    "DesignListResponse",
    "DesignResponse",
    "DesignSummary",
    "DesignUpdateRequest",
    "ProductCreateRequest",
    "ProductListResponse",
    "ProductResponse",
    "ProductSummary",
    "ProductUpdateRequest",
    "ApproveRequest",
    "RejectRequest",
    "ReviewDecisionResponse",
    "ReviewDetailResponse",
    "ReviewListResponse",
    "ReviewResponse",
    "TechnicalSheet",
]
