"""Pydantic request/response schemas for the Storefront API.

These are external contracts (anti-corruption layer), separate from internal
Protean commands. The browser client speaks camelCase JSON, so every schema
aliases its snake_case fields.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class AddressSchema(CamelModel):
    first_name: str
    last_name: str
    address: str
    city: str
    state: str | None = None
    zip_code: str
    country: str
    phone: str | None = None

    def to_domain(self) -> dict:
        data = self.model_dump(by_alias=False)
        data["street"] = data.pop("address")
        return data

    @classmethod
    def from_domain(cls, address) -> "AddressSchema | None":
        if address is None:
            return None
        return cls(
            first_name=address.first_name,
            last_name=address.last_name,
            address=address.street,
            city=address.city,
            state=address.state,
            zip_code=address.zip_code,
            country=address.country,
            phone=address.phone,
        )


class TotalsResponse(CamelModel):
    subtotal: float
    shipping: float
    tax: float
    total: float

    @classmethod
    def from_totals(cls, totals) -> "TotalsResponse":
        rounded = totals.rounded()
        return cls(
            subtotal=float(rounded.subtotal),
            shipping=float(rounded.shipping),
            tax=float(rounded.tax),
            total=float(rounded.total),
        )


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------
class ProductResponse(CamelModel):
    id: str
    name: str
    description: str
    price: float
    image_url: str
    image_urls: list[str] = []
    category: str
    collection: str
    colors: list[str] = []
    sizes: list[str] = []
    is_featured: bool = False
    badge: str | None = None
    dino_facts: str | None = None
    stock: int

    @classmethod
    def from_product(cls, product) -> "ProductResponse":
        return cls(
            id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.price,
            image_url=product.image_url,
            image_urls=product.image_url_list,
            category=product.category,
            collection=product.collection,
            colors=product.color_list,
            sizes=product.size_list,
            is_featured=bool(product.is_featured),
            badge=product.badge,
            dino_facts=product.dino_facts,
            stock=product.stock,
        )


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddCartItemRequest(CamelModel):
    product_id: str
    quantity: int = 1
    color: str | None = None
    size: str | None = None


class UpdateCartItemRequest(CamelModel):
    quantity: int


class CartResponse(CamelModel):
    id: str
    session_id: str
    user_id: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_cart(cls, cart) -> "CartResponse":
        return cls(
            id=str(cart.id),
            session_id=cart.session_id,
            user_id=str(cart.user_id) if cart.user_id else None,
            created_at=cart.created_at,
        )


class CartItemResponse(CamelModel):
    id: str
    cart_id: str
    product_id: str
    quantity: int
    color: str | None = None
    size: str | None = None

    @classmethod
    def from_item(cls, item, cart_id) -> "CartItemResponse":
        return cls(
            id=str(item.id),
            cart_id=str(cart_id),
            product_id=str(item.product_id),
            quantity=item.quantity,
            color=item.color,
            size=item.size,
        )


class CartLineResponse(CartItemResponse):
    product: ProductResponse


class CartView(CamelModel):
    cart: CartResponse
    items: list[CartLineResponse]
    totals: TotalsResponse


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class PlaceOrderRequest(CamelModel):
    """Checkout form. Any client-computed totals in the body are ignored."""

    shipping_address: AddressSchema
    billing_address: AddressSchema | None = None
    same_as_shipping: bool = False
    payment_method: str = Field(default="credit_card", max_length=50)
    user_id: str | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "shippingAddress": {
                        "firstName": "Ada",
                        "lastName": "Lovelace",
                        "address": "12 Fossil Row",
                        "city": "Drumheller",
                        "state": "AB",
                        "zipCode": "T0J 0Y0",
                        "country": "CA",
                        "phone": "555-0100",
                    },
                    "sameAsShipping": True,
                    "paymentMethod": "credit_card",
                }
            ]
        },
    )


class UpdateOrderStatusRequest(CamelModel):
    status: str


class OrderResponse(CamelModel):
    id: str
    user_id: str | None = None
    total: float
    status: str
    created_at: datetime | None = None
    shipping_address: AddressSchema
    billing_address: AddressSchema | None = None
    payment_method: str

    @classmethod
    def from_order(cls, order) -> "OrderResponse":
        return cls(
            id=str(order.id),
            user_id=str(order.user_id) if order.user_id else None,
            total=order.total,
            status=order.status,
            created_at=order.created_at,
            shipping_address=AddressSchema.from_domain(order.shipping_address),
            billing_address=AddressSchema.from_domain(order.billing_address),
            payment_method=order.payment_method,
        )


class OrderItemResponse(CamelModel):
    id: str
    order_id: str
    product_id: str
    quantity: int
    price: float
    color: str | None = None
    size: str | None = None


class OrderView(CamelModel):
    order: OrderResponse
    items: list[OrderItemResponse]

    @classmethod
    def from_order(cls, order) -> "OrderView":
        return cls(
            order=OrderResponse.from_order(order),
            items=[
                OrderItemResponse(
                    id=str(item.id),
                    order_id=str(order.id),
                    product_id=str(item.product_id),
                    quantity=item.quantity,
                    price=item.price,
                    color=item.color,
                    size=item.size,
                )
                for item in order.items
            ],
        )


# ---------------------------------------------------------------------------
# Quizzes
# ---------------------------------------------------------------------------
class QuizResponse(CamelModel):
    id: str
    name: str
    description: str

    @classmethod
    def from_quiz(cls, quiz) -> "QuizResponse":
        return cls(id=str(quiz.id), name=quiz.name, description=quiz.description)


class QuizOptionResponse(CamelModel):
    id: str
    question_id: str
    text: str
    product_id: str | None = None
    order: int


class QuizQuestionResponse(CamelModel):
    id: str
    quiz_id: str
    question: str
    order: int
    options: list[QuizOptionResponse]


class QuizView(CamelModel):
    quiz: QuizResponse
    questions: list[QuizQuestionResponse]

    @classmethod
    def from_quiz(cls, quiz) -> "QuizView":
        return cls(
            quiz=QuizResponse.from_quiz(quiz),
            questions=[
                QuizQuestionResponse(
                    id=str(question.id),
                    quiz_id=str(quiz.id),
                    question=question.question,
                    order=question.display_order,
                    options=[
                        QuizOptionResponse(
                            id=str(option.id),
                            question_id=str(option.question_id),
                            text=option.text,
                            product_id=str(option.product_id) if option.product_id else None,
                            order=option.display_order,
                        )
                        for option in options
                    ],
                )
                for question, options in quiz.structure()
            ],
        )


class QuizAnswer(CamelModel):
    question_id: str
    option_id: str


class RecommendationRequest(CamelModel):
    answers: list[QuizAnswer] = Field(min_length=1)


class RecommendationResponse(CamelModel):
    product_id: str | None = None
    product: ProductResponse | None = None
