"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
``build_context`` runs once at process start; the resulting AppContext
is handed explicitly to the HTTP app and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)


@dataclass(frozen=True)
class AppContext:
    settings: Settings
    product_repo: ProductRepository
    user_repo: UserRepository
    order_repo: OrderRepository


def build_context(settings: Settings | None = None) -> AppContext:
    settings = settings or Settings()
    data_dir = settings.DATA_DIR
    return AppContext(
        settings=settings,
        product_repo=JsonProductRepository(data_dir / "products.json"),
        user_repo=JsonUserRepository(data_dir / "users.json"),
        order_repo=JsonOrderRepository(data_dir / "orders.json"),
    )
