"""
Service functions for product management operations.
Handles the menu views and product CRUD against the catalog store.
"""

import logging
from typing import List, Union

from pos_api.categories.schemas import Category
from pos_api.categories.services import category_sort_key
from pos_api.common.errors import NotFoundError
from pos_api.common.store import get_store
from pos_api.products.schemas import Product, ProductActive, ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


def _group_by_category(store, active_only: bool) -> List[Category]:
    grouped = {category_id: [] for category_id in store.categories}
    for product in store.products.values():
        if active_only and not product["active"]:
            continue
        grouped.setdefault(product["categoryId"], []).append(Product(**product))

    menu = []
    for category in store.categories.values():
        products = sorted(grouped[category["id"]], key=lambda product: product.name)
        menu.append(Category.with_products(category["id"], category["name"], products))
    menu.sort(key=lambda category: category_sort_key(category.name))
    return menu


async def get_menu() -> List[Category]:
    """
    Retrieve every category with its active products.

    Returns:
        Categories in menu order, each with its active products sorted by name
    """
    store = get_store()
    with store.lock:
        return _group_by_category(store, active_only=True)


async def get_all_products_grouped_by_category() -> List[Category]:
    """
    Retrieve every category with all of its products, active or not.
    """
    store = get_store()
    with store.lock:
        return _group_by_category(store, active_only=False)


async def create_product(product_data: ProductCreate) -> Product:
    """
    Create a new active product.

    Args:
        product_data: The validated request body

    Returns:
        The created product

    Raises:
        NotFoundError: If the referenced category does not exist
    """
    store = get_store()
    with store.lock:
        if product_data.categoryId not in store.categories:
            raise NotFoundError("Category", product_data.categoryId)
        record = {
            "id": store.next_product_id(),
            "name": product_data.name,
            "price": product_data.price,
            "active": True,
            "categoryId": product_data.categoryId,
        }
        store.products[record["id"]] = record
    logger.info("Created product id=%s name=%r", record["id"], record["name"])
    return Product(**record)


async def update_product(product_id: int, product_data: Union[ProductUpdate, ProductActive]) -> Product:
    """
    Update the fields of a product that were supplied in the request.

    Args:
        product_id: The product to update
        product_data: The validated request body; unset fields are left untouched

    Returns:
        The updated product

    Raises:
        NotFoundError: If the product or the new category does not exist
    """
    changes = product_data.model_dump(exclude_unset=True)
    store = get_store()
    with store.lock:
        record = store.products.get(product_id)
        if record is None:
            raise NotFoundError("Product", product_id)
        if "categoryId" in changes and changes["categoryId"] not in store.categories:
            raise NotFoundError("Category", changes["categoryId"])
        before_active = record["active"]
        record.update(changes)
        updated = Product(**record)

    if "active" in changes and before_active != changes["active"]:
        logger.info(
            "AUDIT ProductActiveChange id=%s name=%r from=%s to=%s",
            product_id, updated.name, before_active, changes["active"],
        )
    return updated


async def delete_product(product_id: int) -> None:
    """
    Permanently delete a product.

    Raises:
        NotFoundError: If the product does not exist
    """
    store = get_store()
    with store.lock:
        if store.products.pop(product_id, None) is None:
            raise NotFoundError("Product", product_id)
    logger.info("Deleted product id=%s", product_id)


async def get_inactive_product_names() -> List[str]:
    store = get_store()
    with store.lock:
        names = [product["name"] for product in store.products.values() if not product["active"]]
    return sorted(names)
