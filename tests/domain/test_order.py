"""Unit tests for the Order aggregate and its status transitions."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.user import CartLine
from storefront.domain.model.value_objects import Money, Quantity


def _cart(*lines: tuple[str, int]) -> list[CartLine]:
    return [CartLine(product_id=pid, quantity=Quantity(qty)) for pid, qty in lines]


class TestOrderPlacement:

    def test_happy_path(self):
        order = Order.place("u1", _cart(("p1", 2)), Money.of("20"))
        assert order.user_id == "u1"
        assert order.status == OrderStatus.PENDING
        assert order.total_amount == Money.of("20")
        assert len(order.products) == 1
        assert order.products[0].product_id == "p1"
        assert order.products[0].quantity == Quantity(2)

    def test_id_is_none_for_new_orders(self):
        order = Order.place("u1", _cart(("p1", 1)), Money.of("5"))
        assert order.id is None  # assigned by repository

    def test_created_at_is_timezone_aware(self):
        order = Order.place("u1", _cart(("p1", 1)), Money.of("5"))
        assert order.created_at.tzinfo is not None

    def test_empty_cart_rejected(self):
        with pytest.raises(ValidationError, match="Cart is empty"):
            Order.place("u1", [], Money.zero())

    def test_products_are_a_snapshot_of_the_cart(self):
        cart = _cart(("p1", 2), ("p2", 1))
        order = Order.place("u1", cart, Money.of("30"))

        cart.clear()
        cart.extend(_cart(("p9", 7)))

        assert [line.product_id for line in order.products] == ["p1", "p2"]


class TestOrderCancel:

    def test_pending_order_can_be_canceled(self):
        order = Order.place("u1", _cart(("p1", 1)), Money.of("5"))
        order.cancel()
        assert order.status == OrderStatus.CANCELED
        assert not order.is_pending

    def test_cancel_twice_rejected(self):
        order = Order.place("u1", _cart(("p1", 1)), Money.of("5"))
        order.cancel()
        with pytest.raises(ValidationError, match="Only pending orders can be canceled"):
            order.cancel()

    @pytest.mark.parametrize(
        "status", [OrderStatus.SHIPPED, OrderStatus.DELIVERED, OrderStatus.CANCELED]
    )
    def test_non_pending_order_cannot_be_canceled(self, status):
        order = Order.place("u1", _cart(("p1", 1)), Money.of("5"))
        order.status = status
        with pytest.raises(ValidationError, match="Only pending orders"):
            order.cancel()
        assert order.status == status


class TestOrderStatusValues:

    def test_wire_values(self):
        assert [s.value for s in OrderStatus] == [
            "Pending",
            "Shipped",
            "Delivered",
            "Canceled",
        ]
