"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends, status

from src.shop.api.http.deps import get_cart_service, get_catalog_service
from src.shop.api.http.schemas import (
    ProductCreateRequest,
    ProductDeletedResponse,
    ProductResponse,
    ProductUpdateRequest,
    StockUpdateRequest,
)
from src.shop.core.services import CartService, CatalogService

router = APIRouter(prefix="/products", tags=["products"])


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductCreateRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> ProductResponse:
    """Create a new product."""
    return ProductResponse.from_product(service.create_product(**payload.model_dump()))


@router.get("", response_model=list[ProductResponse])
def list_products(
    category: str | None = None,
    service: CatalogService = Depends(get_catalog_service),
) -> list[ProductResponse]:
    """List all products, optionally within one category."""
    return [ProductResponse.from_product(p) for p in service.list_products(category=category)]


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> ProductResponse:
    return ProductResponse.from_product(service.get_product(product_id))


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: str,
    payload: ProductUpdateRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> ProductResponse:
    """Update the fields present in the body."""
    product = service.update_product(product_id, payload.model_dump(exclude_unset=True))
    return ProductResponse.from_product(product)


@router.delete("/{product_id}", response_model=ProductDeletedResponse)
def delete_product(
    product_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> ProductDeletedResponse:
    """Delete a product and every cart line that references it."""
    removed = service.delete_product(product_id)
    return ProductDeletedResponse(
        message="Product deleted successfully", removed_cart_lines=removed
    )


@router.patch("/{product_id}/stock", response_model=ProductResponse)
def set_stock(
    product_id: str,
    payload: StockUpdateRequest,
    service: CartService = Depends(get_cart_service),
) -> ProductResponse:
    return ProductResponse.from_product(service.set_stock(product_id, payload.stock))
