"""Domain events for the Cart aggregate."""

from protean.fields import Boolean, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Cart")
class CartCreated:
    """A cart was opened for a browser session."""

    __version__ = 1

    cart_id: Identifier(required=True)
    session_id: String(required=True)
    user_id: Identifier()


@storefront.event(part_of="Cart")
class CartItemAdded:
    """A product variant was added to the cart, or merged into an existing line."""

    __version__ = 1

    cart_id: Identifier(required=True)
    item_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    color: String()
    size: String()
    merged: Boolean(default=False)


@storefront.event(part_of="Cart")
class CartItemQuantityUpdated:
    __version__ = 1

    cart_id: Identifier(required=True)
    item_id: Identifier(required=True)
    previous_quantity: Integer(required=True)
    new_quantity: Integer(required=True)


@storefront.event(part_of="Cart")
class CartItemRemoved:
    __version__ = 1

    cart_id: Identifier(required=True)
    item_id: Identifier(required=True)
    product_id: Identifier(required=True)
