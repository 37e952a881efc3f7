"""Application service: Place Order use case.

Orchestrates the flow between repositories and the domain model.  This
is the only place that touches three aggregates in one go (User cart,
Product prices, new Order).

There is no transaction around the two writes at the end: if saving the
user fails after the order was saved, the order stands and the cart is
left as it was.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.order_pricing_service import (
    MissingProductPolicy,
    OrderPricingService,
)

logger = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
        missing_product_policy: MissingProductPolicy = MissingProductPolicy.IGNORE,
    ) -> None:
        self._user_repo = user_repo
        self._order_repo = order_repo
        self._pricing = OrderPricingService(product_repo, missing_product_policy)

    def handle(self, user_id: str) -> OrderDTO:
        """Check out the user's cart.

        Steps:
        1. Load the user (fail if unknown).
        2. Refuse an empty cart.
        3. Price the cart at current catalog prices.
        4. Create and persist the order (snapshot of the cart).
        5. Empty the cart and persist the user.
        """
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User not found")

        if user.cart_is_empty:
            raise ValidationError("Cart is empty")

        total = self._pricing.total_for(user.cart)

        order = Order.place(user_id=user.id, cart=user.cart, total_amount=total)
        self._order_repo.save(order)

        user.clear_cart()
        self._user_repo.save(user)

        logger.info(
            "Order placed",
            order_id=order.id,
            user_id=user.id,
            lines=len(order.products),
            total=str(order.total_amount),
        )
        return order_to_dto(order)
