"""
In-memory catalog storage shared by the category and product services.
"""

import threading
from itertools import count
from typing import Any, Dict


class CatalogStore:
    """
    Holds category and product records keyed by integer id.
    Records are plain dicts using the API field names. Mutations must hold ``lock``.
    """

    def __init__(self):
        self.lock = threading.Lock()
        self.categories: Dict[int, Dict[str, Any]] = {}
        self.products: Dict[int, Dict[str, Any]] = {}
        self._category_ids = count(1)
        self._product_ids = count(1)

    def next_category_id(self) -> int:
        return next(self._category_ids)

    def next_product_id(self) -> int:
        return next(self._product_ids)

    def clear(self) -> None:
        with self.lock:
            self.categories.clear()
            self.products.clear()
            self._category_ids = count(1)
            self._product_ids = count(1)


_store = CatalogStore()


def get_store() -> CatalogStore:
    return _store
