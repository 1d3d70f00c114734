# storefront/core/cart_session.py
from fastapi import Header

from storefront.core.config import get_settings

settings = get_settings()


def get_cart_session_id(
    session_id: str | None = Header(
        default=None,
        description="Opaque cart identifier; falls back to the shared default cart",
    ),
) -> str:
    """
    Resolve the cart owner from the `session-id` header.

    Flow:
      1. Header present and non-blank => use it as-is.
      2. Missing/blank => DEFAULT_SESSION_ID ("default-session").

    There is no authentication attached to a session: any client that
    knows a session id can read and change that cart.
    """
    if session_id is None or not session_id.strip():
        return settings.DEFAULT_SESSION_ID
    return session_id
