"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A cart was checked out into a pending order."""

    __version__ = 1

    order_id: Identifier(required=True)
    user_id: Identifier()
    total: Float(required=True)
    item_count: Integer(required=True)
    payment_method: String(required=True)
    placed_at: DateTime(required=True)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    __version__ = 1

    order_id: Identifier(required=True)
    previous_status: String(required=True)
    new_status: String(required=True)
    changed_at: DateTime(required=True)
