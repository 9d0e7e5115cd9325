"""Cart aggregate: a session-scoped shopping cart.

A cart belongs to exactly one browser session. Each line is keyed by
(product, colour, size); adding a variant that is already in the cart merges
into the existing line instead of creating a duplicate.
"""

import uuid
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, HasMany, Identifier, Integer, String

from storefront.cart.events import CartCreated, CartItemAdded, CartItemQuantityUpdated, CartItemRemoved
from storefront.domain import storefront
from storefront.exceptions import InvalidArgument, NotFound


@storefront.value_object(part_of="Cart")
class SessionContext:
    """The caller's session token, possibly minted by the server on first contact."""

    session_id: String(required=True, max_length=255)
    minted: Boolean(default=False)

    @classmethod
    def from_token(cls, token):
        if token and token.strip():
            return cls(session_id=token.strip(), minted=False)
        return cls(session_id=str(uuid.uuid4()), minted=True)


@storefront.entity(part_of="Cart", schema_name="cart_items")
class CartItem:
    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)
    color: String(max_length=50)
    size: String(max_length=20)

    @property
    def variant_key(self):
        return variant_key(self.product_id, self.color, self.size)


def variant_key(product_id, color, size):
    return (str(product_id), color or None, size or None)


@storefront.aggregate(schema_name="carts")
class Cart:
    session_id: String(required=True, max_length=255, unique=True)
    user_id: Identifier()  # Set when a signed-in user owns the session
    items: HasMany(CartItem)
    created_at: DateTime()

    @invariant.post
    def variants_must_be_unique(self):
        keys = [item.variant_key for item in self.items]
        if len(keys) != len(set(keys)):
            raise ValidationError({"items": ["A product variant can appear only once in a cart"]})

    @classmethod
    def open(cls, session_id, user_id=None):
        cart = cls(session_id=session_id, user_id=user_id, created_at=datetime.now(UTC))
        cart.raise_(CartCreated(cart_id=cart.id, session_id=session_id, user_id=user_id))
        return cart

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def find_item(self, item_id):
        item = next((i for i in self.items if str(i.id) == str(item_id)), None)
        if item is None:
            raise NotFound({"item_id": ["Cart item not found"]})
        return item

    def add_item(self, product_id, quantity, color=None, size=None):
        """Add a variant to the cart, merging into an existing line when present.

        Returns the (new or merged) cart item.
        """
        if quantity is None or quantity < 1:
            raise InvalidArgument({"quantity": ["Quantity must be at least 1"]})

        key = variant_key(product_id, color, size)
        existing = next((i for i in self.items if i.variant_key == key), None)

        if existing:
            existing.quantity += quantity
            item = existing
        else:
            item = CartItem(product_id=product_id, quantity=quantity, color=color, size=size)
            self.add_items(item)

        self.raise_(
            CartItemAdded(
                cart_id=self.id,
                item_id=item.id,
                product_id=str(product_id),
                quantity=quantity,
                color=color,
                size=size,
                merged=existing is not None,
            )
        )
        return item

    def update_item_quantity(self, item_id, new_quantity):
        """Set an item's quantity. Setting the same quantity twice is a no-op the second time."""
        if new_quantity is None or new_quantity < 1:
            raise InvalidArgument({"quantity": ["Quantity must be at least 1"]})

        item = self.find_item(item_id)
        previous_quantity = item.quantity
        if previous_quantity == new_quantity:
            return item

        item.quantity = new_quantity
        self.raise_(
            CartItemQuantityUpdated(
                cart_id=self.id,
                item_id=item.id,
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )
        return item

    def remove_item(self, item_id):
        item = self.find_item(item_id)
        self.remove_items(item)
        self.raise_(CartItemRemoved(cart_id=self.id, item_id=item.id, product_id=item.product_id))
