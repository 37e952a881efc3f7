"""Bearer-token guard.

``authenticate`` is a pure function of the raw ``Authorization`` header:
it either returns the caller's identity or raises an AuthenticationError.
It never looks at, or mutates, a request object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import jwt

from storefront.domain.exceptions import InvalidTokenError, MissingCredentialsError


@dataclass(frozen=True)
class Identity:
    """Who is calling, as decoded from the token."""

    user_id: str
    claims: dict[str, Any] = field(default_factory=dict)


def authenticate(
    authorization: str | None,
    secret: str,
    algorithms: list[str] | None = None,
) -> Identity:
    """Verify ``Bearer <token>`` and return the identity it carries.

    Raises:
        MissingCredentialsError: the header is absent or empty.
        InvalidTokenError: there is no token after the scheme, the token
            fails verification (malformed, expired, bad signature), or
            its payload has no ``id``.
    """
    if not authorization:
        raise MissingCredentialsError("Access denied")

    parts = authorization.split()
    if len(parts) < 2:
        raise InvalidTokenError("Invalid token")
    token = parts[1]

    try:
        payload = jwt.decode(token, secret, algorithms=algorithms or ["HS256"])
    except jwt.InvalidTokenError as exc:
        raise InvalidTokenError("Invalid token") from exc

    user_id = payload.get("id") if isinstance(payload, dict) else None
    if not user_id:
        raise InvalidTokenError("Invalid token")

    return Identity(user_id=str(user_id), claims=payload)
