"""Application service: List Catalog use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from retail.domain.model.product import ExpirableProduct, Product
from retail.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class CatalogLineDTO:
    name: str
    price: str
    stock: int
    kind: str


def _kind(product: Product) -> str:
    traits = []
    if isinstance(product, ExpirableProduct):
        traits.append("expired" if product.is_expired() else "expirable")
    if product.requires_shipping():
        traits.append(f"shippable {product.shipping_weight()}")
    return ", ".join(traits) or "plain"


class ListCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[CatalogLineDTO]:
        return [
            CatalogLineDTO(
                name=p.name,
                price=str(p.price),
                stock=p.quantity,
                kind=_kind(p),
            )
            for p in self._product_repo.list_all()
        ]
