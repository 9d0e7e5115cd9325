"""Order aggregate: an immutable snapshot of a checked-out cart.

Item prices and addresses are copied at placement time; later catalogue
changes never alter a placed order. Only the fulfilment status moves on.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from storefront.domain import storefront
from storefront.order.events import OrderPlaced, OrderStatusChanged


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


DEFAULT_PAYMENT_METHOD = "credit_card"

_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),
    OrderStatus.CANCELLED: set(),
}


@storefront.value_object(part_of="Order")
class Address:
    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    state: String(max_length=100)
    zip_code: String(required=True, max_length=20)
    country: String(required=True, max_length=100)
    phone: String(max_length=30)


@storefront.entity(part_of="Order", schema_name="order_items")
class OrderItem:
    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)
    price: Float(required=True, min_value=0.0)  # Unit price at placement time
    color: String(max_length=50)
    size: String(max_length=20)


@storefront.aggregate(schema_name="orders")
class Order:
    user_id: Identifier()
    total: Float(required=True, min_value=0.0)
    status: String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    shipping_address: ValueObject(Address, required=True)
    billing_address: ValueObject(Address)
    payment_method: String(max_length=50, default=DEFAULT_PAYMENT_METHOD)  # Free-text tag from checkout
    items: HasMany(OrderItem)
    created_at: DateTime()

    @classmethod
    def place(cls, total, shipping_address, items, billing_address=None, payment_method=None, user_id=None):
        now = datetime.now(UTC)
        order = cls(
            user_id=user_id,
            total=total,
            status=OrderStatus.PENDING.value,
            shipping_address=shipping_address,
            billing_address=billing_address,
            payment_method=payment_method or DEFAULT_PAYMENT_METHOD,
            created_at=now,
        )
        for item in items:
            order.add_items(item)

        order.raise_(
            OrderPlaced(
                order_id=order.id,
                user_id=user_id,
                total=total,
                item_count=len(items),
                payment_method=order.payment_method,
                placed_at=now,
            )
        )
        return order

    def change_status(self, new_status):
        current = OrderStatus(self.status)
        try:
            target = OrderStatus(new_status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status '{new_status}'"]}) from None

        if target not in _TRANSITIONS[current]:
            raise ValidationError({"status": [f"Cannot change order status from {current.value} to {target.value}"]})

        self.status = target.value
        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                previous_status=current.value,
                new_status=target.value,
                changed_at=datetime.now(UTC),
            )
        )
