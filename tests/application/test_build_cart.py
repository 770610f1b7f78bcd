"""Integration tests for the BuildCart and ListCatalog use cases."""

import pytest

from retail.application.build_cart import BuildCartHandler
from retail.application.dto import CartItemSpec
from retail.application.list_catalog import ListCatalogHandler
from retail.domain.exceptions import EntityNotFoundError, OutOfStockError
from retail.domain.model.product import ExpirableProduct, Product, ShippableProduct
from retail.domain.model.value_objects import Money, Weight
from tests.fakes import FakeProductRepository


def _repo() -> FakeProductRepository:
    return FakeProductRepository([
        ExpirableProduct(name="Cheese", price=Money.of("100"), quantity=5),
        ShippableProduct(name="TV", price=Money.of("300"), quantity=4, weight=Weight.of("10000")),
        Product(name="Scratch Card", price=Money.of("50"), quantity=10),
    ])


class TestBuildCart:

    def test_builds_cart_in_requested_order(self):
        cart = BuildCartHandler(_repo()).handle([
            CartItemSpec("TV", 1),
            CartItemSpec("cheese", 2),
        ])
        assert [(i.product.name, i.quantity.value) for i in cart.items] == [
            ("TV", 1),
            ("Cheese", 2),
        ]

    def test_cart_references_catalog_products(self):
        repo = _repo()
        cart = BuildCartHandler(repo).handle([CartItemSpec("TV", 1)])
        assert cart.items[0].product is repo.get_by_name("TV")

    def test_unknown_product_rejected(self):
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            BuildCartHandler(_repo()).handle([CartItemSpec("Radio", 1)])

    def test_quantity_above_stock_rejected(self):
        with pytest.raises(OutOfStockError, match="TV is out of stock"):
            BuildCartHandler(_repo()).handle([CartItemSpec("TV", 5)])


class TestListCatalog:

    def test_lists_every_product(self):
        lines = ListCatalogHandler(_repo()).handle()
        assert [(l.name, l.price, l.stock) for l in lines] == [
            ("Cheese", "100.00", 5),
            ("TV", "300.00", 4),
            ("Scratch Card", "50.00", 10),
        ]

    def test_kind_describes_capabilities(self):
        kinds = {l.name: l.kind for l in ListCatalogHandler(_repo()).handle()}
        assert kinds == {
            "Cheese": "expirable",
            "TV": "shippable 10000g",
            "Scratch Card": "plain",
        }
