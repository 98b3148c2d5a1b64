import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from storefront.application.catalog import NewProduct, ProductChanges, ProductService
from storefront.domain.catalog.entities.product import Product
from storefront.domain.common.exceptions import DomainError
from storefront.domain.common.value_objects.ids import ProductId
from storefront.infrastructure.catalog.schemas import (
    ProductCreateRequest,
    ProductResponse,
    ProductsListResponse,
    ProductUpdateRequest,
)
from storefront.infrastructure.common.di import inject_service
from storefront.infrastructure.common.schemas import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])

ProductServiceDep = Annotated[ProductService, Depends(inject_service("product_service"))]


def _to_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id.value,
        sku=product.sku,
        name=product.name,
        price_cents=product.price_cents,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(request: ProductCreateRequest, service: ProductServiceDep) -> ProductResponse:
    """
    Create a product.

    Args:
        request: SKU, name and price of the new product
        service: ProductService injected via dependency container

    Returns:
        The created product

    Raises:
        HTTPException: 400 on invalid fields, 409 if the SKU is taken
    """
    try:
        product = service.create(
            NewProduct(sku=request.sku, name=request.name, price_cents=request.price_cents)
        )
        return _to_response(product)
    except DomainError:
        # Re-raise domain errors - handled by exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to create product: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("", response_model=ProductsListResponse, status_code=status.HTTP_200_OK)
def list_products(service: ProductServiceDep) -> ProductsListResponse:
    """List all products, oldest first."""
    try:
        products = service.list_all()
        return ProductsListResponse(products=[_to_response(product) for product in products])
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to list products: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{product_id}", response_model=ProductResponse, status_code=status.HTTP_200_OK)
def get_product(product_id: UUID, service: ProductServiceDep) -> ProductResponse:
    """Get a product by id."""
    try:
        return _to_response(service.get_by_id(ProductId(product_id)))
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to get product {product_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put("/{product_id}", response_model=ProductResponse, status_code=status.HTTP_200_OK)
def update_product(
    product_id: UUID, request: ProductUpdateRequest, service: ProductServiceDep
) -> ProductResponse:
    """
    Update any of a product's SKU, name and price.

    Raises:
        HTTPException: 400 on invalid fields, 404 if missing, 409 if the SKU is taken
    """
    try:
        product = service.update(
            ProductId(product_id),
            ProductChanges(sku=request.sku, name=request.name, price_cents=request.price_cents),
        )
        return _to_response(product)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to update product {product_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete(
    "/{product_id}", response_model=SuccessResponse, status_code=status.HTTP_200_OK
)
def delete_product(product_id: UUID, service: ProductServiceDep) -> SuccessResponse:
    """Delete a product."""
    try:
        service.delete(ProductId(product_id))
        return SuccessResponse(success=True, message=f"Product {product_id} deleted")
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to delete product {product_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
