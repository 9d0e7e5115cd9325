"""Request-level helpers shared by the storefront routers."""

import uuid
from typing import Annotated

from fastapi import Header

from storefront.cart.cart import SessionContext
from storefront.exceptions import InvalidArgument


def session_context(x_session_id: Annotated[str | None, Header()] = None) -> SessionContext:
    """The caller's session, minting a fresh token when the header is absent."""
    return SessionContext.from_token(x_session_id)


def require_session(x_session_id: Annotated[str | None, Header()] = None) -> SessionContext:
    """The caller's session; writes without a session token are rejected."""
    session = SessionContext.from_token(x_session_id)
    if session.minted:
        raise InvalidArgument({"session_id": ["Session ID is required"]})
    return session


def parse_id(value: str, label: str) -> str:
    """Validate a path identifier, raising InvalidArgument when it is malformed."""
    try:
        return str(uuid.UUID(value))
    except (ValueError, AttributeError, TypeError):
        raise InvalidArgument({"id": [f"Invalid {label} ID"]}) from None
