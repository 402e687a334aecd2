"""
This module contains the FastAPI routers for product endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, Response
from starlette import status

from pos_api.categories.schemas import Category
from pos_api.common.schemas import JSendResponse
from pos_api.common.validation import validated
from pos_api.products.schemas import (
    Product, ProductIdRequest, ProductCreateRequest, ProductUpdateRequest, ProductActiveRequest,
)
from pos_api.products.services import (
    get_menu, get_all_products_grouped_by_category, create_product,
    update_product, delete_product, get_inactive_product_names,
)

router = APIRouter()


@router.get("", response_model=JSendResponse[List[Category]], response_model_exclude_none=True)
async def list_menu():
    """
    Get all categories with their active products.

    Returns:
        JSendResponse containing categories, each with active products sorted by name
    """
    menu = await get_menu()
    return JSendResponse.success(menu)


@router.get("/all", response_model=JSendResponse[List[Category]], response_model_exclude_none=True)
async def list_all_products():
    """
    Get all categories with all of their products, active and inactive.
    """
    menu = await get_all_products_grouped_by_category()
    return JSendResponse.success(menu)


@router.get("/inactive-names", response_model=JSendResponse[List[str]], response_model_exclude_none=True)
async def list_inactive_product_names():
    names = await get_inactive_product_names()
    return JSendResponse.success(names)


@router.post(
    "",
    response_model=JSendResponse[Product],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_product_endpoint(request: ProductCreateRequest = Depends(validated(ProductCreateRequest))):
    """
    Create a new product in an existing category.

    Args:
        request: The validated request (injected)

    Returns:
        JSendResponse containing the created product
    """
    product = await create_product(request.body)
    return JSendResponse.success(product)


@router.patch("/{id}", response_model=JSendResponse[Product], response_model_exclude_none=True)
async def update_product_endpoint(request: ProductUpdateRequest = Depends(validated(ProductUpdateRequest))):
    """
    Update a product's name, price, category or active flag.
    Only the fields present in the body are changed.

    Args:
        request: The validated request (injected)

    Returns:
        JSendResponse containing the updated product
    """
    product = await update_product(request.params.id, request.body)
    return JSendResponse.success(product)


@router.patch("/{id}/active", response_model=JSendResponse[Product], response_model_exclude_none=True)
async def update_product_active_endpoint(request: ProductActiveRequest = Depends(validated(ProductActiveRequest))):
    """
    Enable or disable a product.
    """
    product = await update_product(request.params.id, request.body)
    return JSendResponse.success(product)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_product_endpoint(request: ProductIdRequest = Depends(validated(ProductIdRequest))):
    """
    Permanently delete a product.
    """
    await delete_product(request.params.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
