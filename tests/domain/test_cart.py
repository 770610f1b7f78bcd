"""Unit tests for the Cart aggregate."""

import pytest

from retail.domain.exceptions import OutOfStockError, ValidationError
from retail.domain.model.cart import Cart
from retail.domain.model.product import Product, ShippableProduct
from retail.domain.model.value_objects import Money, Weight


def _card(quantity: int = 10) -> Product:
    return Product(name="Scratch Card", price=Money.of("50"), quantity=quantity)


class TestCartAdd:

    def test_new_cart_is_empty(self):
        cart = Cart()
        assert cart.is_empty()
        assert len(cart) == 0
        assert cart.items == ()

    def test_add_appends_in_order(self):
        cart = Cart()
        card = _card()
        tv = ShippableProduct(
            name="TV", price=Money.of("300"), quantity=4, weight=Weight.of("10000")
        )
        cart.add(card, 2)
        cart.add(tv, 1)
        assert not cart.is_empty()
        assert [item.product.name for item in cart.items] == ["Scratch Card", "TV"]

    def test_add_keeps_product_reference(self):
        cart = Cart()
        card = _card()
        item = cart.add(card, 1)
        assert item.product is card

    def test_add_does_not_reserve_stock(self):
        cart = Cart()
        card = _card(quantity=3)
        cart.add(card, 3)
        assert card.quantity == 3

    def test_add_exceeding_stock_rejected(self):
        cart = Cart()
        with pytest.raises(OutOfStockError, match="Scratch Card is out of stock"):
            cart.add(_card(quantity=2), 3)
        assert cart.is_empty()

    def test_add_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Cart().add(_card(), 0)

    def test_clear(self):
        cart = Cart()
        cart.add(_card(), 1)
        cart.clear()
        assert cart.is_empty()


class TestCartItem:

    def test_line_total(self):
        cart = Cart()
        item = cart.add(_card(), 3)
        assert item.line_total == Money.of("150")

    def test_line_weight(self):
        tv = ShippableProduct(
            name="TV", price=Money.of("300"), quantity=4, weight=Weight.of("10000")
        )
        item = Cart().add(tv, 2)
        assert item.line_weight == Weight.of("20000")

    def test_line_weight_of_plain_product_is_zero(self):
        item = Cart().add(_card(), 2)
        assert item.line_weight == Weight.zero()
