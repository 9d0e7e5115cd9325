"""Shared storefront fixtures: catalogue factories and session carts."""

import json
import uuid

import pytest
from protean import current_domain
from storefront.cart.management import resolve_cart
from storefront.catalogue.creation import CreateProduct


def create_product(**overrides):
    data = {
        "name": "T-Rex Trappers",
        "description": "Fierce kicks.",
        "price": 129.99,
        "image_url": "https://example.com/trex.jpg",
        "image_urls": json.dumps(["https://example.com/trex.jpg"]),
        "category": "Running",
        "collection": "T-Rex Line",
        "colors": json.dumps(["#39FF14", "#FF5714"]),
        "sizes": json.dumps(["9", "10"]),
        "is_featured": True,
        "badge": "HOT!",
        "dino_facts": "Grip pattern inspired by T-Rex footprints.",
        "stock": 25,
    }
    data.update(overrides)
    return current_domain.process(CreateProduct(**data), asynchronous=False)


@pytest.fixture()
def make_product():
    return create_product


@pytest.fixture()
def trex_id():
    return create_product()


@pytest.fixture()
def raptor_id():
    return create_product(
        name="Volcano Velociraptors",
        price=149.99,
        collection="Raptor Series",
        badge="NEW",
    )


@pytest.fixture()
def stego_id():
    return create_product(
        name="Stegosaurus Steppers",
        price=119.99,
        category="Casual",
        collection="Herbivore Collection",
        is_featured=False,
        badge="",
    )


@pytest.fixture()
def session_id():
    return str(uuid.uuid4())


@pytest.fixture()
def cart(session_id):
    return resolve_cart(session_id)
