"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data from the application layer to the HTTP and CLI layers
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from storefront.domain.model.order import Order
from storefront.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:

    id: str
    name: str
    price: Decimal
    image: str


@dataclass(frozen=True)
class OrderLineDTO:
    """A snapshot line, optionally joined to the product it refers to."""

    product_id: str
    quantity: int
    product: ProductDTO | None = None  # None when not resolved or deleted


@dataclass(frozen=True)
class OrderDTO:

    id: str
    user_id: str
    products: list[OrderLineDTO]
    total_amount: Decimal
    status: str
    created_at: datetime


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=product.price.amount,
        image=product.image,
    )


def order_to_dto(
    order: Order,
    catalog: dict[str, Product] | None = None,
) -> OrderDTO:
    """Map an order; when ``catalog`` is given, resolve each line's product."""
    lines = []
    for line in order.products:
        product = catalog.get(line.product_id) if catalog is not None else None
        lines.append(
            OrderLineDTO(
                product_id=line.product_id,
                quantity=line.quantity.value,
                product=product_to_dto(product) if product is not None else None,
            )
        )
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        user_id=order.user_id,
        products=lines,
        total_amount=order.total_amount.amount,
        status=order.status.value,
        created_at=order.created_at,
    )
