"""Application service: Cancel Order use case.

Only PENDING orders can be canceled.  The lookup is scoped to the
caller, so another user's order looks exactly like a missing one.
Canceling does not put anything back in the cart.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class CancelOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, user_id: str, order_id: str) -> None:
        order = self._order_repo.get_for_user(order_id, user_id)
        if order is None:
            raise EntityNotFoundError("Order not found")

        order.cancel()
        self._order_repo.save(order)

        logger.info("Order canceled", order_id=order.id, user_id=user_id)
