"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; nothing is shared across
users. State tracks the session token and ids returned by the API so that
follow-up requests can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks one simulated shopper's session, cart and last order."""

    session_id: str | None = None
    products: list[dict] = field(default_factory=list)
    item_ids: list[str] = field(default_factory=list)
    order_id: str | None = None

    @property
    def headers(self) -> dict:
        return {"X-Session-ID": self.session_id} if self.session_id else {}


@dataclass
class QuizState:
    """Tracks the quiz a shopper is taking."""

    quiz_id: str | None = None
    quiz_view: dict | None = None
