"""Technical sheet read-model.

Assembled on demand from an approved design and never persisted.
"""

from pydantic import BaseModel, ConfigDict, Field

from stamp_studio.domain.transforms import PrintArea, Transforms


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class SheetProduct(_Frozen):
    id: int
    name: str
    category: str
    base_model: str = Field(description="Thumbnail URL of the base garment, or empty")


class SheetSpecifications(_Frozen):
    color: str
    stamp_image_url: str
    transforms: Transforms
    print_area: PrintArea


class SheetClient(_Frozen):
    id: int
    name: str | None
    email: str


class SheetProduction(_Frozen):
    estimated_quantity: int = Field(ge=1)
    notes: str


class TechnicalSheet(_Frozen):
    design_id: int
    approved_at: str = Field(description="ISO-8601 timestamp of the approving review")
    product: SheetProduct
    specifications: SheetSpecifications
    client: SheetClient
    production: SheetProduction
