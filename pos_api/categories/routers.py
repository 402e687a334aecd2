"""
FastAPI routers for category management endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends
from starlette import status

from pos_api.categories.schemas import Category, CategoryCreateRequest
from pos_api.categories.services import get_categories, create_category
from pos_api.common.schemas import JSendResponse
from pos_api.common.validation import validated

router = APIRouter()


@router.get("", response_model=JSendResponse[List[Category]], response_model_exclude_none=True)
async def list_categories():
    """
    Get all categories with the number of active products in each.

    Returns:
        JSendResponse containing category summaries
    """
    categories = await get_categories()
    return JSendResponse.success(categories)


@router.post(
    "",
    response_model=JSendResponse[Category],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_category_endpoint(request: CategoryCreateRequest = Depends(validated(CategoryCreateRequest))):
    """
    Create a new category.

    Args:
        request: The validated request (injected)

    Returns:
        JSendResponse containing the created category
    """
    category = await create_category(request.body)
    return JSendResponse.success(category)
