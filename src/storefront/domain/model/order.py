"""Order aggregate, the core of the domain.

An Order is the frozen record of a cart at the moment it was checked
out. Its lines and total never change afterwards; only the status moves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.user import CartLine
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "Pending"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELED = "Canceled"


@dataclass(frozen=True)
class OrderLine:
    """Snapshot of a single cart line taken at order-creation time."""

    product_id: str
    quantity: Quantity


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.place()`` factory for new orders.  The ``__init__``
    is intentionally simple so the repository can reconstitute persisted
    orders without re-validating.
    """

    id: str | None
    user_id: str
    products: list[OrderLine]
    total_amount: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def place(user_id: str, cart: list[CartLine], total_amount: Money) -> Order:
        """Turn a cart into a new pending order."""
        if not cart:
            raise ValidationError("Cart is empty")

        snapshot = [
            OrderLine(product_id=line.product_id, quantity=line.quantity)
            for line in cart
        ]
        return Order(
            id=None,
            user_id=user_id,
            products=snapshot,
            total_amount=total_amount,
        )

    # --- State transitions ----------------------------------------------------

    def cancel(self) -> None:
        """Transition PENDING -> CANCELED.  Any other status is refused."""
        if self.status != OrderStatus.PENDING:
            raise ValidationError("Only pending orders can be canceled")
        self.status = OrderStatus.CANCELED

    @property
    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING
