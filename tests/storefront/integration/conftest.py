import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from storefront.api import register_error_handlers, routers


@pytest.fixture()
def client():
    app = FastAPI()
    for router in routers:
        app.include_router(router)
    register_error_handlers(app)
    return TestClient(app)


@pytest.fixture()
def session_headers(session_id):
    return {"X-Session-ID": session_id}


@pytest.fixture()
def checkout_body():
    return {
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
