"""Product aggregate.

Products are owned by the catalog, not by this service: the order
workflow only ever reads them to price a cart.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: str
    name: str
    price: Money
    image: str = ""
