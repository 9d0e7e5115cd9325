"""FastAPI routes for the storefront catalogue, cart, orders and quizzes."""

import json
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response
from protean.utils.globals import current_domain

from storefront.api.dependencies import parse_id, require_session, session_context
from storefront.api.schemas import (
    AddCartItemRequest,
    CartItemResponse,
    CartLineResponse,
    CartResponse,
    CartView,
    OrderView,
    PlaceOrderRequest,
    ProductResponse,
    QuizResponse,
    QuizView,
    RecommendationRequest,
    RecommendationResponse,
    TotalsResponse,
    UpdateCartItemRequest,
    UpdateOrderStatusRequest,
)
from storefront.cart.cart import Cart, SessionContext
from storefront.cart.items import AddToCart, RemoveFromCart, UpdateCartItemQuantity, process_cart_write
from storefront.cart.management import resolve_cart
from storefront.cart.pricing import compute_totals, enrich_items
from storefront.catalogue.product import Product
from storefront.exceptions import EmptyCart, NotFound
from storefront.order.order import Order
from storefront.order.placement import PlaceOrder
from storefront.order.status import UpdateOrderStatus
from storefront.quiz.quiz import Quiz

# ---------------------------------------------------------------------------
# Catalogue Routers
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/api/products", tags=["products"])
collection_router = APIRouter(prefix="/api/collections", tags=["products"])
category_router = APIRouter(prefix="/api/categories", tags=["products"])


def _products(products) -> list[ProductResponse]:
    return [ProductResponse.from_product(p) for p in products]


@product_router.get("", response_model=list[ProductResponse])
async def list_products() -> list[ProductResponse]:
    return _products(current_domain.repository_for(Product).all_products())


# Declared before /{product_id} so that "featured" is not taken for an id
@product_router.get("/featured", response_model=list[ProductResponse])
async def list_featured_products() -> list[ProductResponse]:
    return _products(current_domain.repository_for(Product).featured())


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).get(parse_id(product_id, "product"))
    return ProductResponse.from_product(product)


@collection_router.get("/{collection}", response_model=list[ProductResponse])
async def list_collection(collection: str) -> list[ProductResponse]:
    return _products(current_domain.repository_for(Product).in_collection(collection))


@category_router.get("/{category}", response_model=list[ProductResponse])
async def list_category(category: str) -> list[ProductResponse]:
    return _products(current_domain.repository_for(Product).in_category(category))


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/api/cart", tags=["cart"])


def _session_cart(session: SessionContext) -> Cart:
    """The session's existing cart; item-level calls never open a new one."""
    cart = current_domain.repository_for(Cart).find_by_session(session.session_id)
    if cart is None:
        raise NotFound({"item_id": ["Cart item not found"]})
    return cart


@cart_router.get("", response_model=CartView)
async def get_cart(response: Response, session: Annotated[SessionContext, Depends(session_context)]) -> CartView:
    cart = resolve_cart(session.session_id)
    if session.minted:
        response.headers["X-Session-ID"] = session.session_id

    lines = enrich_items(cart.items)
    return CartView(
        cart=CartResponse.from_cart(cart),
        items=[
            CartLineResponse(
                **CartItemResponse.from_item(line.item, cart.id).model_dump(),
                product=ProductResponse.from_product(line.product),
            )
            for line in lines
        ],
        totals=TotalsResponse.from_totals(compute_totals(lines)),
    )


@cart_router.post("/items", status_code=201, response_model=CartItemResponse)
async def add_cart_item(
    body: AddCartItemRequest, session: Annotated[SessionContext, Depends(require_session)]
) -> CartItemResponse:
    cart = resolve_cart(session.session_id)
    command = AddToCart(
        cart_id=cart.id,
        product_id=parse_id(body.product_id, "product"),
        quantity=body.quantity,
        color=body.color,
        size=body.size,
    )
    item_id = process_cart_write(command)

    cart = current_domain.repository_for(Cart).get(cart.id)
    return CartItemResponse.from_item(cart.find_item(item_id), cart.id)


@cart_router.put("/items/{item_id}", response_model=CartItemResponse)
async def update_cart_item(
    item_id: str, body: UpdateCartItemRequest, session: Annotated[SessionContext, Depends(require_session)]
) -> CartItemResponse:
    item_id = parse_id(item_id, "cart item")
    cart = _session_cart(session)
    command = UpdateCartItemQuantity(cart_id=cart.id, item_id=item_id, quantity=body.quantity)
    process_cart_write(command)

    cart = current_domain.repository_for(Cart).get(cart.id)
    return CartItemResponse.from_item(cart.find_item(item_id), cart.id)


@cart_router.delete("/items/{item_id}", status_code=204)
async def remove_cart_item(item_id: str, session: Annotated[SessionContext, Depends(require_session)]) -> Response:
    item_id = parse_id(item_id, "cart item")
    cart = _session_cart(session)
    process_cart_write(RemoveFromCart(cart_id=cart.id, item_id=item_id))
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/api/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderView)
async def place_order(body: PlaceOrderRequest, session: Annotated[SessionContext, Depends(require_session)]) -> OrderView:
    cart = current_domain.repository_for(Cart).find_by_session(session.session_id)
    if cart is None:
        raise EmptyCart({"cart": ["Cannot place an order for an empty cart"]})

    command = PlaceOrder(
        cart_id=cart.id,
        shipping_address=json.dumps(body.shipping_address.to_domain()),
        billing_address=json.dumps(body.billing_address.to_domain()) if body.billing_address else None,
        same_as_shipping=body.same_as_shipping,
        payment_method=body.payment_method,
        user_id=body.user_id,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderView.from_order(current_domain.repository_for(Order).get(order_id))


@order_router.get("", response_model=list[OrderView])
async def list_orders(user_id: Annotated[str, Query(alias="userId")]) -> list[OrderView]:
    orders = current_domain.repository_for(Order).for_user(user_id)
    return [OrderView.from_order(order) for order in orders]


@order_router.get("/{order_id}", response_model=OrderView)
async def get_order(order_id: str) -> OrderView:
    order = current_domain.repository_for(Order).get(parse_id(order_id, "order"))
    return OrderView.from_order(order)


@order_router.put("/{order_id}/status", response_model=OrderView)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> OrderView:
    order_id = parse_id(order_id, "order")
    current_domain.process(UpdateOrderStatus(order_id=order_id, status=body.status), asynchronous=False)
    return OrderView.from_order(current_domain.repository_for(Order).get(order_id))


# ---------------------------------------------------------------------------
# Quiz Router
# ---------------------------------------------------------------------------
quiz_router = APIRouter(prefix="/api/quizzes", tags=["quizzes"])


@quiz_router.get("", response_model=list[QuizResponse])
async def list_quizzes() -> list[QuizResponse]:
    return [QuizResponse.from_quiz(q) for q in current_domain.repository_for(Quiz).all_quizzes()]


@quiz_router.get("/{quiz_id}", response_model=QuizView)
async def get_quiz(quiz_id: str) -> QuizView:
    quiz = current_domain.repository_for(Quiz).get(parse_id(quiz_id, "quiz"))
    return QuizView.from_quiz(quiz)


@quiz_router.post("/{quiz_id}/recommendation", response_model=RecommendationResponse)
async def recommend(quiz_id: str, body: RecommendationRequest) -> RecommendationResponse:
    quiz = current_domain.repository_for(Quiz).get(parse_id(quiz_id, "quiz"))
    product_id = quiz.recommend((answer.question_id, answer.option_id) for answer in body.answers)
    if product_id is None:
        return RecommendationResponse()

    product = current_domain.repository_for(Product).find_many([product_id]).get(str(product_id))
    return RecommendationResponse(
        product_id=str(product_id),
        product=ProductResponse.from_product(product) if product else None,
    )
