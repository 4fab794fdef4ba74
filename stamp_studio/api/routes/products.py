"""Product catalog endpoints."""

from decimal import Decimal

from fastapi import APIRouter, Query, status

from stamp_studio.api.deps import AdminCaller, Products
from stamp_studio.repositories.base import ProductFilter
from stamp_studio.schemas.product import (
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductUpdateRequest,
)

router = APIRouter()


@router.get("", response_model=ProductListResponse)
async def list_products(
    service: Products,
    category: str | None = None,
    active: bool | None = None,
    min_price: Decimal | None = Query(default=None, ge=0),
    max_price: Decimal | None = Query(default=None, ge=0),
) -> ProductListResponse:
    """List catalog products (active only unless ``active`` is given)."""
    products = await service.list_products(
        ProductFilter(
            category=category,
            active=active,
            min_price=min_price,
            max_price=max_price,
        )
    )
    return ProductListResponse(
        products=[ProductResponse.model_validate(p) for p in products],
        total=len(products),
    )


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, service: Products) -> ProductResponse:
    return ProductResponse.model_validate(await service.get_product(product_id))


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: ProductCreateRequest,
    service: Products,
    _: AdminCaller,
) -> ProductResponse:
    product = await service.create_product(request.model_dump())
    return ProductResponse.model_validate(product)


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    request: ProductUpdateRequest,
    service: Products,
    _: AdminCaller,
) -> ProductResponse:
    product = await service.update_product(product_id, request.model_dump(exclude_unset=True))
    return ProductResponse.model_validate(product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, service: Products, _: AdminCaller) -> None:
    await service.delete_product(product_id)
