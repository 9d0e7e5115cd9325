"""Order placement: checkout of a session cart into an order."""

import json

import structlog
from protean import handle
from protean.fields import Boolean, Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.cart.pricing import compute_totals, enrich_items, round_money
from storefront.domain import storefront
from storefront.exceptions import EmptyCart
from storefront.order.order import Address, Order, OrderItem

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    cart_id: Identifier(required=True)
    shipping_address: Text(required=True)  # JSON: address dict
    billing_address: Text()  # JSON: address dict, ignored when same_as_shipping
    same_as_shipping: Boolean(default=False)
    payment_method: String(max_length=50)
    user_id: Identifier()


def _load(value):
    return json.loads(value) if isinstance(value, str) else value


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        """Convert the cart into a pending order in a single write.

        Totals are always recomputed from live catalogue prices. The cart is
        left untouched.
        """
        cart = current_domain.repository_for(Cart).get(command.cart_id)
        if not cart.items:
            raise EmptyCart({"cart": ["Cannot place an order for an empty cart"]})

        lines = enrich_items(cart.items)
        totals = compute_totals(lines)

        shipping_address = Address(**_load(command.shipping_address))
        if command.same_as_shipping:
            billing_address = shipping_address
        elif command.billing_address:
            billing_address = Address(**_load(command.billing_address))
        else:
            billing_address = None

        items = [
            OrderItem(
                product_id=line.item.product_id,
                quantity=line.quantity,
                price=line.product.price,
                color=line.item.color,
                size=line.item.size,
            )
            for line in lines
        ]

        order = Order.place(
            total=float(round_money(totals.total)),
            shipping_address=shipping_address,
            billing_address=billing_address,
            payment_method=command.payment_method,
            user_id=command.user_id or cart.user_id,
            items=items,
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            cart_id=str(cart.id),
            item_count=len(items),
            subtotal=str(round_money(totals.subtotal)),
            tax=str(round_money(totals.tax)),
            total=order.total,
        )
        return str(order.id)
