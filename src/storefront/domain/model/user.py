"""User aggregate and the cart it carries.

Registration, login and cart editing live in other services. The order
workflow reads the cart and empties it once an order has been placed.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.value_objects import Quantity


@dataclass(frozen=True)
class CartLine:
    """One product the user intends to buy, and how many."""

    product_id: str
    quantity: Quantity


@dataclass
class User:

    id: str
    name: str
    email: str
    password: str  # hashed elsewhere, opaque here
    cart: list[CartLine] = field(default_factory=list)
    favorites: list[str] = field(default_factory=list)

    @property
    def cart_is_empty(self) -> bool:
        return not self.cart

    def clear_cart(self) -> None:
        self.cart = []
