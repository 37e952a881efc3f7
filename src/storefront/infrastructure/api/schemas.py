"""Pydantic response schemas for the HTTP API.

These are the external contract: camelCase field names, money as JSON
numbers.  They are built from application DTOs, never from domain
objects directly.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from storefront.application.dto import OrderDTO, OrderLineDTO, ProductDTO


class _Schema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductSchema(_Schema):
    id: str
    name: str
    price: float
    image: str

    @classmethod
    def from_dto(cls, dto: ProductDTO) -> ProductSchema:
        return cls(id=dto.id, name=dto.name, price=float(dto.price), image=dto.image)


class OrderLineSchema(_Schema):
    product_id: str
    quantity: int
    product: ProductSchema | None = None

    @classmethod
    def from_dto(cls, dto: OrderLineDTO) -> OrderLineSchema:
        return cls(
            product_id=dto.product_id,
            quantity=dto.quantity,
            product=ProductSchema.from_dto(dto.product) if dto.product else None,
        )


class OrderSchema(_Schema):
    id: str
    user_id: str
    products: list[OrderLineSchema]
    total_amount: float
    status: str
    created_at: datetime

    @classmethod
    def from_dto(cls, dto: OrderDTO) -> OrderSchema:
        return cls(
            id=dto.id,
            user_id=dto.user_id,
            products=[OrderLineSchema.from_dto(line) for line in dto.products],
            total_amount=float(dto.total_amount),
            status=dto.status,
            created_at=dto.created_at,
        )


class MessageResponse(BaseModel):
    message: str


class PlaceOrderResponse(BaseModel):
    message: str
    order: OrderSchema


class ErrorResponse(BaseModel):
    error: str
