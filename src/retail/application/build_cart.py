"""Application service: Build Cart use case.

Resolves product names against the catalog and adds each requested
quantity to a fresh cart.  Availability is checked by ``Cart.add``.
"""

from __future__ import annotations

from retail.application.dto import CartItemSpec
from retail.domain.exceptions import EntityNotFoundError
from retail.domain.model.cart import Cart
from retail.domain.repository.product_repository import ProductRepository


class BuildCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, item_specs: list[CartItemSpec]) -> Cart:
        cart = Cart()
        for spec in item_specs:
            product = self._product_repo.get_by_name(spec.product_name)
            if product is None:
                raise EntityNotFoundError(
                    f"Product not found: '{spec.product_name}'"
                )
            cart.add(product, spec.quantity)
        return cart
