"""
Service functions for category management operations.
"""

import logging
from typing import List

from pos_api.categories.schemas import Category, CategoryCreate
from pos_api.common.store import get_store

logger = logging.getLogger(__name__)

# Menu order of the known categories; any other category follows them alphabetically.
CATEGORY_ORDER = [
    "Pollos Asados",
    "Costillas y Patas Asadas",
    "Guarniciones",
    "Quesadillas y Burritos",
    "Platos Combinados",
    "Mojos y Salsas",
    "Bebidas",
]


def category_sort_key(name: str):
    position = CATEGORY_ORDER.index(name) if name in CATEGORY_ORDER else len(CATEGORY_ORDER)
    return position, name


async def get_categories() -> List[Category]:
    """
    Retrieve every category with the number of active products it holds.

    Returns:
        Category summaries in menu order
    """
    store = get_store()
    with store.lock:
        active_counts = {}
        for product in store.products.values():
            if product["active"]:
                active_counts[product["categoryId"]] = active_counts.get(product["categoryId"], 0) + 1
        categories = [
            Category.summary(category["id"], category["name"], active_counts.get(category["id"], 0))
            for category in store.categories.values()
        ]
    categories.sort(key=lambda category: category_sort_key(category.name))
    return categories


async def create_category(category_data: CategoryCreate) -> Category:
    """
    Create a new category.

    Args:
        category_data: The validated request body

    Returns:
        The created category
    """
    store = get_store()
    with store.lock:
        record = {"id": store.next_category_id(), "name": category_data.name}
        store.categories[record["id"]] = record
    logger.info("Created category id=%s name=%r", record["id"], record["name"])
    return Category(**record)
