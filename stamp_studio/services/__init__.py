"""Application services for the design review workflow."""

from stamp_studio.services.design_service import DesignService
from stamp_studio.services.product_service import ProductService
from stamp_studio.services.review_service import ReviewService
from stamp_studio.services.technical_sheet import TechnicalSheetGenerator

__all__ = [
    "DesignService",
    "ProductService",
    "ReviewService",
    "TechnicalSheetGenerator",
]
