"""Unit tests for the OrderPricingService domain service."""

import pytest

from storefront.domain.exceptions import DataIntegrityError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.user import CartLine
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.service.order_pricing_service import (
    MissingProductPolicy,
    OrderPricingService,
)
from tests.fakes import FakeProductRepository


def _service(policy: MissingProductPolicy = MissingProductPolicy.IGNORE) -> OrderPricingService:
    products = [
        Product(id="p1", name="Mug", price=Money.of("10.00")),
        Product(id="p2", name="Poster", price=Money.of("4.25")),
    ]
    return OrderPricingService(FakeProductRepository(products), policy)


def _cart(*lines: tuple[str, int]) -> list[CartLine]:
    return [CartLine(product_id=pid, quantity=Quantity(qty)) for pid, qty in lines]


class TestTotals:

    def test_single_line(self):
        assert _service().total_for(_cart(("p1", 2))) == Money.of("20.00")

    def test_several_lines(self):
        total = _service().total_for(_cart(("p1", 3), ("p2", 4)))
        assert total == Money.of("47.00")

    def test_same_product_twice_counts_both_lines(self):
        total = _service().total_for(_cart(("p1", 1), ("p1", 1)))
        assert total == Money.of("20.00")

    def test_empty_cart_totals_zero(self):
        assert _service().total_for([]) == Money.zero()


class TestMissingProducts:

    def test_ignore_skips_the_line(self):
        total = _service().total_for(_cart(("p1", 1), ("gone", 5)))
        assert total == Money.of("10.00")

    def test_ignore_with_only_missing_products_totals_zero(self):
        assert _service().total_for(_cart(("gone", 5))) == Money.zero()

    def test_reject_raises_validation_error(self):
        svc = _service(MissingProductPolicy.REJECT)
        with pytest.raises(ValidationError, match="gone is no longer available"):
            svc.total_for(_cart(("p1", 1), ("gone", 5)))

    def test_error_raises_data_integrity_error(self):
        svc = _service(MissingProductPolicy.ERROR)
        with pytest.raises(DataIntegrityError, match="unknown product gone"):
            svc.total_for(_cart(("gone", 1)))

    def test_policy_parses_from_config_string(self):
        assert MissingProductPolicy("reject") is MissingProductPolicy.REJECT
