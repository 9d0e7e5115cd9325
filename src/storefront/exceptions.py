"""Error taxonomy for storefront operations.

Domain errors extend Protean's exceptions so that they carry the same
``messages`` mapping (``{"field": ["message", ...]}``) as the framework's own
validation failures. The HTTP layer maps each class to a status code.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class NotFound(ObjectNotFoundError):
    """A product, cart item, order or quiz does not exist."""


class InvalidArgument(ValidationError):
    """Malformed identifier, body or out-of-range value such as quantity < 1."""


class EmptyCart(ValidationError):
    """Order placement was attempted on a cart with no items."""


class ProductMissing(ValidationError):
    """A cart item references a product that no longer exists."""


class StoreError(Exception):
    """The underlying persistence layer failed."""


def error_message(exc: Exception) -> str:
    """Flatten an exception's messages into one human-readable string."""
    messages = getattr(exc, "messages", None)
    if isinstance(messages, dict):
        parts = []
        for value in messages.values():
            if isinstance(value, list | tuple):
                parts.extend(str(v) for v in value)
            else:
                parts.append(str(value))
        return "; ".join(parts)
    if messages:
        return str(messages)
    return str(exc)
