"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from storefront.domain.model.order import Order, OrderLine, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_collection import JsonCollection


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_for_user(self, order_id: str, user_id: str) -> Order | None:
        raw = self._collection.find_one(
            lambda r: r["id"] == order_id and r["userId"] == user_id
        )
        if raw is None:
            return None
        return self._collection.decode(raw, self._to_domain)

    def list_for_user(self, user_id: str) -> list[Order]:
        return [
            self._collection.decode(raw, self._to_domain)
            for raw in self._collection.find(lambda r: r["userId"] == user_id)
        ]

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._collection.new_id()
        self._collection.upsert(self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "userId": order.user_id,
            "products": [
                {"productId": line.product_id, "quantity": line.quantity.value}
                for line in order.products
            ],
            "totalAmount": str(order.total_amount.amount),
            "status": order.status.value,
            "createdAt": order.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        return Order(
            id=raw["id"],
            user_id=raw["userId"],
            products=[
                OrderLine(product_id=p["productId"], quantity=Quantity(p["quantity"]))
                for p in raw["products"]
            ],
            total_amount=Money.of(raw["totalAmount"]),
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["createdAt"]),
        )
