"""FastAPI routes for products and orders.

Route functions are plain ``def``: the repositories do blocking file
I/O, so FastAPI runs each request in its worker threadpool.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.infrastructure.api.dependencies import current_identity, get_context
from storefront.infrastructure.api.schemas import (
    ErrorResponse,
    MessageResponse,
    OrderSchema,
    PlaceOrderResponse,
    ProductSchema,
)
from storefront.infrastructure.auth import Identity
from storefront.infrastructure.bootstrap import AppContext

_INTERNAL = {500: {"model": ErrorResponse}}
_AUTHENTICATED = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    **_INTERNAL,
}

# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=list[ProductSchema], responses=_INTERNAL)
def list_products(context: AppContext = Depends(get_context)) -> list[ProductSchema]:
    handler = ListProductsHandler(product_repo=context.product_repo)
    return [ProductSchema.from_dto(dto) for dto in handler.handle()]


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post(
    "",
    response_model=PlaceOrderResponse,
    responses={404: {"model": ErrorResponse}, **_AUTHENTICATED},
)
def place_order(
    identity: Identity = Depends(current_identity),
    context: AppContext = Depends(get_context),
) -> PlaceOrderResponse:
    handler = PlaceOrderHandler(
        user_repo=context.user_repo,
        product_repo=context.product_repo,
        order_repo=context.order_repo,
        missing_product_policy=context.settings.MISSING_PRODUCT_POLICY,
    )
    dto = handler.handle(identity.user_id)
    return PlaceOrderResponse(
        message="Order placed successfully",
        order=OrderSchema.from_dto(dto),
    )


@order_router.get("", response_model=list[OrderSchema], responses=_AUTHENTICATED)
def list_orders(
    identity: Identity = Depends(current_identity),
    context: AppContext = Depends(get_context),
) -> list[OrderSchema]:
    handler = ListOrdersHandler(
        order_repo=context.order_repo,
        product_repo=context.product_repo,
    )
    return [OrderSchema.from_dto(dto) for dto in handler.handle(identity.user_id)]


@order_router.delete(
    "/{order_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}, **_AUTHENTICATED},
)
def cancel_order(
    order_id: str,
    identity: Identity = Depends(current_identity),
    context: AppContext = Depends(get_context),
) -> MessageResponse:
    handler = CancelOrderHandler(order_repo=context.order_repo)
    handler.handle(user_id=identity.user_id, order_id=order_id)
    return MessageResponse(message="Order canceled successfully")
