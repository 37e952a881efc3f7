"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_for_user(self, order_id: str, user_id: str) -> Order | None:
        """Return the order only if it exists AND belongs to ``user_id``."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Order]:
        """Return every order owned by ``user_id``, oldest first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order.

        New orders (``id is None``) are assigned an opaque ID.
        """
