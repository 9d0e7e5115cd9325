"""Cart item management: commands and handler."""

import structlog
from protean import handle
from protean.exceptions import ExpectedVersionError, ObjectNotFoundError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.exceptions import NotFound

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Cart")
class AddToCart:
    cart_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    color: String(max_length=50)
    size: String(max_length=20)


@storefront.command(part_of="Cart")
class UpdateCartItemQuantity:
    cart_id: Identifier(required=True)
    item_id: Identifier(required=True)
    quantity: Integer(required=True)


@storefront.command(part_of="Cart")
class RemoveFromCart:
    cart_id: Identifier(required=True)
    item_id: Identifier(required=True)


@storefront.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        try:
            current_domain.repository_for(Product).get(command.product_id)
        except ObjectNotFoundError:
            raise NotFound({"product_id": [f"Product {command.product_id} not found"]}) from None

        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        item = cart.add_item(
            product_id=command.product_id,
            quantity=command.quantity,
            color=command.color,
            size=command.size,
        )
        repo.add(cart)

        logger.info(
            "cart_item_added",
            cart_id=str(cart.id),
            item_id=str(item.id),
            product_id=str(command.product_id),
            quantity=item.quantity,
        )
        return str(item.id)

    @handle(UpdateCartItemQuantity)
    def update_quantity(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        item = cart.update_item_quantity(item_id=command.item_id, new_quantity=command.quantity)
        repo.add(cart)
        return str(item.id)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        cart.remove_item(item_id=command.item_id)
        repo.add(cart)


MAX_WRITE_ATTEMPTS = 3


def process_cart_write(command):
    """Process a cart item command, replaying it when a concurrent write wins.

    Each attempt reloads the cart, so a replayed add merges into whatever the
    competing request saved. ExpectedVersionError escapes after the last attempt.
    """
    for attempt in range(1, MAX_WRITE_ATTEMPTS + 1):
        try:
            return current_domain.process(command, asynchronous=False)
        except ExpectedVersionError:
            if attempt == MAX_WRITE_ATTEMPTS:
                raise
            logger.info(
                "cart_write_conflict",
                cart_id=str(command.cart_id),
                command=command.__class__.__name__,
                attempt=attempt,
            )
