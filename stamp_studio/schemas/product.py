"""Product catalog schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, model_validator

# Columns that are NOT NULL; a partial update may omit them but not null them
REQUIRED_PRODUCT_FIELDS = frozenset(
    {"name", "category", "base_model_url", "available_colors", "price", "active"}
)


def _normalize_colors(colors: list[str]) -> list[str]:
    cleaned = [c.strip() for c in colors]
    if any(not c for c in cleaned):
        raise ValueError("Colors must be non-empty strings")
    if len(set(cleaned)) != len(cleaned):
        raise ValueError("Colors must be unique")
    return cleaned


class ProductCreateRequest(BaseModel):
    """Payload for adding a product to the catalog."""

    name: str = Field(min_length=1, max_length=200)
    category: str = Field(min_length=1, max_length=100)
    base_model_url: str = Field(min_length=1, max_length=500)
    available_colors: list[str] = Field(min_length=1, description="Colors offered for this garment")
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    thumbnail_url: str | None = Field(default=None, max_length=500)
    description: str | None = None
    active: bool = True

    model_config = {"extra": "forbid"}

    @field_validator("available_colors")
    @classmethod
    def validate_colors(cls, v: list[str]) -> list[str]:
        return _normalize_colors(v)


class ProductUpdateRequest(BaseModel):
    """Partial product update; only fields that are set are applied."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    category: str | None = Field(default=None, min_length=1, max_length=100)
    base_model_url: str | None = Field(default=None, min_length=1, max_length=500)
    available_colors: list[str] | None = Field(default=None, min_length=1)
    price: Decimal | None = Field(default=None, gt=0, max_digits=10, decimal_places=2)
    thumbnail_url: str | None = Field(default=None, max_length=500)
    description: str | None = None
    active: bool | None = None

    model_config = {"extra": "forbid"}

    @field_validator("available_colors")
    @classmethod
    def validate_colors(cls, v: list[str] | None) -> list[str] | None:
        return _normalize_colors(v) if v is not None else None

    @model_validator(mode="after")
    def reject_null_required_fields(self) -> "ProductUpdateRequest":
        nulls = sorted(
            name for name in self.model_fields_set & REQUIRED_PRODUCT_FIELDS
            if getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self


class ProductResponse(BaseModel):
    id: int
    name: str
    category: str
    base_model_url: str
    available_colors: list[str]
    price: Decimal
    thumbnail_url: str | None = None
    description: str | None = None
    active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProductListResponse(BaseModel):
    products: list[ProductResponse]
    total: int


class ProductSummary(BaseModel):
    """Product fields embedded in design responses."""

    id: int
    name: str
    category: str
    thumbnail_url: str | None = None

    model_config = {"from_attributes": True}
