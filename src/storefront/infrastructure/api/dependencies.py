"""FastAPI dependencies: the application context and the caller's identity."""

from __future__ import annotations

from fastapi import Depends, Header, Request

from storefront.infrastructure.auth import Identity, authenticate
from storefront.infrastructure.bootstrap import AppContext


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def current_identity(
    authorization: str | None = Header(default=None),
    context: AppContext = Depends(get_context),
) -> Identity:
    return authenticate(
        authorization,
        secret=context.settings.JWT_SECRET,
        algorithms=[context.settings.JWT_ALGORITHM],
    )
