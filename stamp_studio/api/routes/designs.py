"""Design endpoints.

Clients create and edit their own designs; designers and admins browse
the review queue.
"""

from datetime import datetime
from typing import Any

from fastapi import APIRouter, Query, status

from stamp_studio.api.deps import CurrentCaller, Designs, ReviewerCaller
from stamp_studio.domain.lifecycle import DesignStatus
from stamp_studio.models import Design
from stamp_studio.repositories.base import DesignFilter
from stamp_studio.schemas.design import (
    DesignCreateRequest,
    DesignDetailResponse,
    DesignListResponse,
    DesignResponse,
    DesignSummary,
    DesignUpdateRequest,
)

router = APIRouter()


def _listing(designs: list[Design]) -> DesignListResponse:
    return DesignListResponse(
        designs=[DesignDetailResponse.model_validate(d) for d in designs],
        total=len(designs),
    )


@router.post("", response_model=DesignSummary, status_code=status.HTTP_201_CREATED)
async def create_design(
    request: DesignCreateRequest,
    caller: CurrentCaller,
    service: Designs,
) -> DesignSummary:
    """Submit a new design for review. It starts in PENDING."""
    design = await service.create_design(
        user_id=caller.user_id,
        product_id=request.product_id,
        color=request.color,
        image_url=request.image_url,
        transforms=request.transforms,
    )
    return DesignSummary.model_validate(design)


@router.get("/user/me", response_model=DesignListResponse)
async def get_my_designs(caller: CurrentCaller, service: Designs) -> DesignListResponse:
    return _listing(await service.get_user_designs(caller.user_id))


@router.get("/pending/all", response_model=DesignListResponse)
async def get_pending_designs(_: ReviewerCaller, service: Designs) -> DesignListResponse:
    """Review queue: every PENDING design, newest first."""
    return _listing(await service.get_pending_designs())


@router.get("", response_model=DesignListResponse)
async def list_designs(
    _: ReviewerCaller,
    service: Designs,
    user_id: int | None = None,
    product_id: int | None = None,
    design_status: DesignStatus | None = Query(default=None, alias="status"),
    date_from: datetime | None = None,
    date_to: datetime | None = None,
) -> DesignListResponse:
    designs = await service.get_all_designs(
        DesignFilter(
            user_id=user_id,
            product_id=product_id,
            status=design_status,
            date_from=date_from,
            date_to=date_to,
        )
    )
    return _listing(designs)


@router.get("/{design_id}", response_model=DesignDetailResponse)
async def get_design(design_id: int, caller: CurrentCaller, service: Designs) -> DesignDetailResponse:
    return DesignDetailResponse.model_validate(await service.get_design(design_id, caller))


@router.patch("/{design_id}", response_model=DesignResponse)
async def update_design(
    design_id: int,
    request: DesignUpdateRequest,
    caller: CurrentCaller,
    service: Designs,
) -> DesignResponse:
    """Partially update a PENDING design.

    Explicit nulls are ignored except for ``status``, which is always
    rejected.
    """
    changes: dict[str, Any] = {
        name: getattr(request, name)
        for name in request.model_fields_set
        if name == "status" or getattr(request, name) is not None
    }
    design = await service.update_design(design_id, changes, caller)
    return DesignResponse.model_validate(design)


@router.delete("/{design_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_design(design_id: int, caller: CurrentCaller, service: Designs) -> None:
    await service.delete_design(design_id, caller)
