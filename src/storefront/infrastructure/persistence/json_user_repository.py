"""JSON-file-backed implementation of UserRepository.

Documents use the camelCase field names the rest of the storefront
writes (``productId`` inside cart lines).
"""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.user import CartLine, User
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.json_collection import JsonCollection


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    # --- UserRepository interface ---------------------------------------------

    def get_by_id(self, user_id: str) -> User | None:
        raw = self._collection.find_one(lambda r: r["id"] == user_id)
        if raw is None:
            return None
        return self._collection.decode(raw, self._to_domain)

    def save(self, user: User) -> None:
        self._collection.upsert(self._to_raw(user))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "password": user.password,
            "cart": [
                {"productId": line.product_id, "quantity": line.quantity.value}
                for line in user.cart
            ],
            "favorites": [{"productId": pid} for pid in user.favorites],
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            name=raw.get("name", ""),
            email=raw.get("email", ""),
            password=raw.get("password", ""),
            cart=[
                CartLine(product_id=c["productId"], quantity=Quantity(c["quantity"]))
                for c in raw.get("cart", [])
            ],
            favorites=[f["productId"] for f in raw.get("favorites", [])],
        )
