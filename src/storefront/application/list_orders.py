"""Application service: List Orders use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.model.product import Product
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository


class ListOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, user_id: str) -> list[OrderDTO]:
        """Return the caller's orders with each line joined to its product.

        Lines whose product has left the catalog come back unresolved.
        """
        orders = self._order_repo.list_for_user(user_id)

        catalog: dict[str, Product] = {}
        for order in orders:
            for line in order.products:
                if line.product_id in catalog:
                    continue
                product = self._product_repo.get_by_id(line.product_id)
                if product is not None:
                    catalog[line.product_id] = product

        return [order_to_dto(order, catalog) for order in orders]
