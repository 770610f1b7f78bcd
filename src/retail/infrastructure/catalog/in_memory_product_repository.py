"""In-memory implementation of ProductRepository.

Products are held by reference, so stock reduced by a checkout is seen
by every later lookup in the same process.
"""

from __future__ import annotations

from retail.domain.exceptions import ValidationError
from retail.domain.model.product import Product
from retail.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for product in products or []:
            key = product.name.lower()
            if key in self._store:
                raise ValidationError(f"Product '{product.name}' already exists")
            self._store[key] = product

    # --- ProductRepository interface ------------------------------------------

    def get_by_name(self, name: str) -> Product | None:
        return self._store.get(name.strip().lower())

    def list_all(self) -> list[Product]:
        return list(self._store.values())
