"""Technical sheet generation for approved designs."""

from stamp_studio.domain.errors import InvariantViolationError, NotFoundError
from stamp_studio.domain.lifecycle import ReviewStatus, ensure_sheet_ready
from stamp_studio.domain.transforms import calculate_print_area
from stamp_studio.infra.logging import get_logger
from stamp_studio.repositories.base import DesignStore, ReviewStore
from stamp_studio.schemas.technical_sheet import (
    SheetClient,
    SheetProduct,
    SheetProduction,
    SheetSpecifications,
    TechnicalSheet,
)

logger = get_logger(__name__)

DEFAULT_PRODUCTION_NOTES = "No additional notes"
ESTIMATED_QUANTITY = 1


class TechnicalSheetGenerator:
    """Builds production sheets from persisted designs. Read-only."""

    def __init__(self, designs: DesignStore, reviews: ReviewStore) -> None:
        self._designs = designs
        self._reviews = reviews

    async def generate_technical_sheet(self, design_id: int) -> TechnicalSheet:
        """Assemble the technical sheet of an approved design.

        Raises:
            NotFoundError: Design does not exist
            InvalidStateError: Design is not APPROVED
            InvariantViolationError: Design is APPROVED but has no approving review
        """
        design = await self._designs.find_by_id_with_relations(design_id)
        if design is None:
            raise NotFoundError("Design not found", design_id=design_id)
        ensure_sheet_ready(design.status)

        reviews = await self._reviews.find_by_design_id(design_id)
        approval = next((r for r in reviews if r.status == ReviewStatus.APPROVED), None)
        if approval is None:
            logger.error("Approved design has no approval review", design_id=design_id)
            raise InvariantViolationError("No approval review found", design_id=design_id)

        product = design.product
        client = design.user

        return TechnicalSheet(
            design_id=design.id,
            approved_at=approval.created_at.isoformat(),
            product=SheetProduct(
                id=product.id,
                name=product.name,
                category=product.category,
                base_model=product.thumbnail_url or "",
            ),
            specifications=SheetSpecifications(
                color=design.color,
                stamp_image_url=design.image_url,
                transforms=design.transforms,
                print_area=calculate_print_area(design.transforms),
            ),
            client=SheetClient(id=client.id, name=client.name, email=client.email),
            production=SheetProduction(
                estimated_quantity=ESTIMATED_QUANTITY,
                notes=approval.comment or DEFAULT_PRODUCTION_NOTES,
            ),
        )
