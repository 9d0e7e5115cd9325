"""Error body shape and status mapping for failures outside the domain."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.exceptions import ExpectedVersionError
from sqlalchemy.exc import OperationalError
from storefront.api import register_error_handlers
from storefront.exceptions import EmptyCart, ProductMissing, StoreError


@pytest.fixture()
def failing_client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/store-error")
    async def store_error():
        raise StoreError("disk full")

    @app.get("/sqlalchemy-error")
    async def sqlalchemy_error():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    @app.get("/bug")
    async def bug():
        raise RuntimeError("boom")

    @app.get("/missing-product")
    async def missing_product():
        raise ProductMissing({"product_id": ["Product p-1 is no longer available"]})

    @app.get("/empty-cart")
    async def empty_cart():
        raise EmptyCart({"cart": ["Cannot place an order for an empty cart"]})

    @app.get("/write-conflict")
    async def write_conflict():
        raise ExpectedVersionError("Wrong expected version")

    return TestClient(app, raise_server_exceptions=False)


def test_store_error_is_500(failing_client):
    response = failing_client.get("/store-error")
    assert response.status_code == 500
    assert response.json() == {"message": "A storage error occurred"}


def test_database_driver_error_is_500(failing_client):
    response = failing_client.get("/sqlalchemy-error")
    assert response.status_code == 500
    assert response.json() == {"message": "A storage error occurred"}


def test_unexpected_error_hides_details(failing_client):
    response = failing_client.get("/bug")
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}


def test_product_missing_is_conflict(failing_client):
    response = failing_client.get("/missing-product")
    assert response.status_code == 409
    assert response.json() == {"message": "Product p-1 is no longer available"}


def test_empty_cart_is_bad_request(failing_client):
    response = failing_client.get("/empty-cart")
    assert response.status_code == 400


def test_write_conflict_is_409(failing_client):
    response = failing_client.get("/write-conflict")
    assert response.status_code == 409
    assert "changed by another request" in response.json()["message"]
