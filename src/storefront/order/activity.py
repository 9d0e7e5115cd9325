"""Order activity log: records order lifecycle events."""

import structlog
from protean.utils.mixins import handle

from storefront.domain import storefront
from storefront.order.events import OrderPlaced, OrderStatusChanged
from storefront.order.order import Order

logger = structlog.get_logger(__name__)


@storefront.event_handler(part_of=Order)
class OrderActivityHandler:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        logger.info(
            "order_activity",
            activity="placed",
            order_id=str(event.order_id),
            user_id=str(event.user_id) if event.user_id else None,
            total=event.total,
            item_count=event.item_count,
        )

    @handle(OrderStatusChanged)
    def on_status_changed(self, event: OrderStatusChanged) -> None:
        logger.info(
            "order_activity",
            activity="status_changed",
            order_id=str(event.order_id),
            previous_status=event.previous_status,
            new_status=event.new_status,
        )
