"""Domain service: Order Pricing.

Totals a cart against the catalog at checkout time.  The total is
computed from the *current* product prices and then frozen on the order.

Cart lines can point at products that have since left the catalog.
What happens to them is decided by ``MissingProductPolicy``.
"""

from __future__ import annotations

from enum import Enum

import structlog

from storefront.domain.exceptions import DataIntegrityError, ValidationError
from storefront.domain.model.user import CartLine
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class MissingProductPolicy(str, Enum):
    IGNORE = "ignore"  # line contributes nothing to the total
    REJECT = "reject"  # refuse the order as a bad request
    ERROR = "error"  # treat as corrupt data (server error)


class OrderPricingService:

    def __init__(
        self,
        product_repo: ProductRepository,
        missing_product_policy: MissingProductPolicy = MissingProductPolicy.IGNORE,
    ) -> None:
        self._product_repo = product_repo
        self._policy = missing_product_policy

    def total_for(self, cart: list[CartLine]) -> Money:
        """Sum ``price * quantity`` over every cart line.

        Lines are priced one at a time, in cart order.  Under the REJECT
        and ERROR policies the first missing product aborts the whole
        calculation.
        """
        total = Money.zero()
        for line in cart:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                self._handle_missing(line)
                continue
            total = total + product.price * line.quantity.value
        return total

    def _handle_missing(self, line: CartLine) -> None:
        if self._policy == MissingProductPolicy.REJECT:
            raise ValidationError(
                f"Product {line.product_id} is no longer available"
            )
        if self._policy == MissingProductPolicy.ERROR:
            raise DataIntegrityError(
                f"Cart references unknown product {line.product_id}"
            )
        logger.warning(
            "Skipping missing product while pricing cart",
            product_id=line.product_id,
            quantity=line.quantity.value,
        )
