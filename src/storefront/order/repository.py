from storefront.domain import storefront
from storefront.order.order import Order


@storefront.repository(part_of=Order)
class OrderRepository:
    def for_user(self, user_id: str) -> list[Order]:
        """Orders placed by a user, newest first."""
        return self._dao.query.filter(user_id=user_id).order_by("-created_at").all().items
