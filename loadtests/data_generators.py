"""Faker-based data generators for Locust load test scenarios.

Each generator produces camelCase payloads that match the field names expected
by the storefront API's Pydantic request schemas.
"""

import random

from faker import Faker

fake = Faker()

# ---------- Cart ----------


def cart_item_data(product: dict, quantity: int | None = None) -> dict:
    """Generate an AddCartItemRequest payload for one of the product's variants."""
    return {
        "productId": product["id"],
        "quantity": quantity or random.randint(1, 3),
        "color": random.choice(product["colors"]) if product.get("colors") else None,
        "size": random.choice(product["sizes"]) if product.get("sizes") else None,
    }


# ---------- Checkout ----------


def address_data() -> dict:
    """Generate an address payload within the schema's field limits."""
    return {
        "firstName": fake.first_name()[:100],
        "lastName": fake.last_name()[:100],
        "address": fake.street_address()[:255],
        "city": fake.city()[:100],
        "state": fake.state_abbr(),
        "zipCode": fake.zipcode()[:20],
        "country": "US",
        "phone": fake.phone_number()[:30],
    }


def checkout_data(user_id: str | None = None) -> dict:
    """Generate a PlaceOrderRequest payload; billing usually mirrors shipping."""
    same_as_shipping = random.random() < 0.8
    payload = {
        "shippingAddress": address_data(),
        "sameAsShipping": same_as_shipping,
        "paymentMethod": "credit_card",
    }
    if not same_as_shipping:
        payload["billingAddress"] = address_data()
    if user_id:
        payload["userId"] = user_id
    return payload


# ---------- Quiz ----------


def quiz_answers(quiz_view: dict) -> list[dict]:
    """Pick one random option per question."""
    return [
        {"questionId": question["id"], "optionId": random.choice(question["options"])["id"]}
        for question in quiz_view["questions"]
        if question["options"]
    ]
