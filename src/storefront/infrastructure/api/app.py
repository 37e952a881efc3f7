"""FastAPI application factory.

``create_app()`` with no arguments builds everything from the
environment, which is what ``storefront serve`` hands to uvicorn.
Tests pass a ready-made AppContext instead.
"""

from __future__ import annotations

import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from storefront.infrastructure.api.errors import register_error_handlers
from storefront.infrastructure.api.routes import order_router, product_router
from storefront.infrastructure.bootstrap import AppContext, build_context
from storefront.infrastructure.logging import bind_request_id, configure_logging


def create_app(context: AppContext | None = None) -> FastAPI:
    if context is None:
        context = build_context()
        configure_logging(context.settings.LOG_LEVEL, context.settings.LOG_FORMAT)

    app = FastAPI(title=context.settings.APP_NAME)
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[context.settings.CORS_ORIGIN],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def _request_id_mw(request: Request, call_next):
        rid = request.headers.get("x-request-id") or uuid.uuid4().hex
        bind_request_id(rid)
        response = await call_next(request)
        response.headers["x-request-id"] = rid
        return response

    register_error_handlers(app)
    app.include_router(product_router)
    app.include_router(order_router)

    return app
