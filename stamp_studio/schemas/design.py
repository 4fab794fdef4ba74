"""Design request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from stamp_studio.domain.lifecycle import DesignStatus
from stamp_studio.domain.transforms import Transforms
from stamp_studio.schemas.common import UserSummary
from stamp_studio.schemas.product import ProductSummary


def _validate_http_url(v: str) -> str:
    if not v.startswith(("http://", "https://")):
        raise ValueError("image_url must be an http(s) URL")
    return v


class DesignCreateRequest(BaseModel):
    """Payload submitted by a client to create a design."""

    product_id: int = Field(gt=0, description="Base product ID")
    color: str = Field(min_length=1, max_length=50, description="Garment color")
    image_url: str = Field(min_length=1, max_length=500, description="Stamp image URL")
    transforms: Transforms

    model_config = {"extra": "forbid"}

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, v: str) -> str:
        """Validate that image_url is an http(s) URL."""
        return _validate_http_url(v)


class DesignUpdateRequest(BaseModel):
    """Partial design update.

    ``status`` is accepted by the schema so the policy can reject it
    explicitly instead of silently dropping it.
    """

    color: str | None = Field(default=None, min_length=1, max_length=50)
    image_url: str | None = Field(default=None, min_length=1, max_length=500)
    transforms: Transforms | None = None
    status: DesignStatus | None = None

    model_config = {"extra": "forbid"}

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, v: str | None) -> str | None:
        return _validate_http_url(v) if v is not None else None


class DesignSummary(BaseModel):
    """Short response returned after creating a design."""

    id: int
    status: DesignStatus
    created_at: datetime

    model_config = {"from_attributes": True}


class DesignResponse(BaseModel):
    id: int
    user_id: int
    product_id: int
    color: str
    image_url: str
    transforms: Transforms
    status: DesignStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class DesignDetailResponse(DesignResponse):
    """Design with owner and product summaries."""

    user: UserSummary
    product: ProductSummary


class DesignListResponse(BaseModel):
    designs: list[DesignDetailResponse]
    total: int
