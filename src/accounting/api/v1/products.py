"""Product endpoints - company-scoped read and update."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, HTTPException, status

from src.accounting.api.dependencies import DBSession, ProductsReader, ProductsWriter
from src.accounting.repositories import ProductRepository
from src.accounting.schemas.product import ProductRead, ProductResponse, validate_product_update
from src.accounting.services.product_service import (
    ProductCodeConflictError,
    ProductNotFoundError,
    ProductService,
)

router = APIRouter(prefix="/products", tags=["products"])


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get product",
    responses={
        200: {"description": "Product details"},
        404: {"description": "Product not found"},
    },
)
async def get_product(
    product_id: str,
    session: DBSession,
    auth: ProductsReader,
) -> ProductResponse:
    product = await ProductRepository(session).get_for_company(product_id, auth.company_id)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )
    return ProductResponse(data=ProductRead.model_validate(product))


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Update product",
    description="Update a product; only supplied fields change.",
    responses={
        200: {"description": "Product updated"},
        400: {"description": "Invalid body"},
        404: {"description": "Product not found"},
        409: {"description": "Product with this code already exists"},
    },
)
async def update_product(
    product_id: str,
    body: Annotated[Any, Body()],
    session: DBSession,
    auth: ProductsWriter,
) -> ProductResponse:
    data = validate_product_update(body).unwrap()

    try:
        product = await ProductService(session, auth).update_product(product_id, data)
    except ProductNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        ) from e
    except ProductCodeConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Product with code '{e.code}' already exists",
        ) from e

    return ProductResponse(data=ProductRead.model_validate(product))
