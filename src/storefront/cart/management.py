"""Cart resolution: find the session's cart or open one."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.domain import storefront

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Cart")
class ResolveCart:
    """Return the cart for a session, creating it on first use."""

    session_id: String(required=True, max_length=255)
    user_id: Identifier()


@storefront.command_handler(part_of=Cart)
class ResolveCartHandler:
    @handle(ResolveCart)
    def resolve_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.find_by_session(command.session_id)
        if cart is None:
            cart = Cart.open(session_id=command.session_id, user_id=command.user_id)
            repo.add(cart)
            logger.info("cart_opened", cart_id=str(cart.id), session_id=command.session_id)
        return str(cart.id)


def resolve_cart(session_id: str, user_id=None) -> Cart:
    """Resolve the session's cart, tolerating a concurrent first request.

    Two requests for a brand-new session may both try to open a cart; the
    loser trips the unique session constraint and picks up the winner's cart.
    """
    try:
        cart_id = current_domain.process(ResolveCart(session_id=session_id, user_id=user_id), asynchronous=False)
    except ValidationError as exc:
        if "session_id" not in exc.messages:
            raise
        cart = current_domain.repository_for(Cart).find_by_session(session_id)
        if cart is None:
            raise
        logger.info("cart_open_race_lost", cart_id=str(cart.id), session_id=session_id)
        return cart
    return current_domain.repository_for(Cart).get(cart_id)
