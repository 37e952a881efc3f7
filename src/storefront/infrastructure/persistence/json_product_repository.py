"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_collection import JsonCollection


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        raw = self._collection.find_one(lambda r: r["id"] == product_id)
        if raw is None:
            return None
        return self._collection.decode(raw, self._to_domain)

    def list_all(self) -> list[Product]:
        return [
            self._collection.decode(raw, self._to_domain)
            for raw in self._collection.load()
        ]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money.of(raw["price"]),
            image=raw.get("image", ""),
        )
